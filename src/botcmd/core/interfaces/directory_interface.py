from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from botcmd.core.domain.permissions import CapabilityType
from botcmd.core.domain.references import ChannelRef, ServerRef, UserRef


class IDirectory(ABC):
    """Lookup service for the users and channels of a chat platform."""

    @abstractmethod
    def resolve_user_by_id(self, server: ServerRef, user_id: str) -> UserRef | None:
        """Return the member with the given id, or None."""

    @abstractmethod
    def resolve_users_by_name(self, server: ServerRef, name: str) -> list[UserRef]:
        """Return members whose name matches case-insensitively, best match first."""

    @abstractmethod
    def resolve_channel_by_id(
        self, server: ServerRef, channel_id: str
    ) -> ChannelRef | None:
        """Return the channel with the given id, or None."""

    @abstractmethod
    def external_capabilities_of(
        self, server: ServerRef, user: UserRef
    ) -> set[CapabilityType]:
        """Return the platform permissions the user holds on the server."""

    @abstractmethod
    def is_automated_sender(self, user: UserRef) -> bool:
        """Return True for bot accounts and other automated senders."""

    @abstractmethod
    def is_bot_owner(self, user: UserRef) -> bool:
        """Return True if the user owns this bot."""

    @abstractmethod
    def owner_of(self, server: ServerRef) -> UserRef:
        """Return the owner of the server."""


class IChatPlatform(IDirectory):
    """Directory plus the messaging and scheduling side of the platform."""

    @abstractmethod
    def send_message(self, channel: ChannelRef, content: str) -> Any:
        """Send ``content`` to ``channel``.

        Returns whatever handle the platform uses for the pending send; the
        dispatcher never waits on it.
        """

    @abstractmethod
    def submit_background_task(self, task: Callable[[], Any]) -> None:
        """Run ``task`` on a worker, fire-and-forget."""
