"""
References to chat-platform entities.

The interpreter never owns users, channels or servers; it only carries
these lightweight handles between the platform adapter and command tasks.
Adapters map them back to platform objects by ``id``.
"""

from __future__ import annotations

from botcmd.core.domain.base import ValueObject


class UserRef(ValueObject):
    """A chat participant as seen by the directory."""

    id: str
    name: str = ""


class ChannelRef(ValueObject):
    """A text channel messages can be sent to."""

    id: str
    name: str = ""


class ServerRef(ValueObject):
    """A server (guild) scoping users, channels and macros."""

    id: str
    name: str = ""
