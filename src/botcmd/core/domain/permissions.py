from __future__ import annotations

from enum import Enum

from pydantic import Field

from botcmd.core.domain.base import ValueObject

# Platform-defined capability names, e.g. "MANAGE_MESSAGES"
CapabilityType = str


class SpecialRestriction(str, Enum):
    """Role checks that override every other permission rule."""

    BOT_OWNER = "bot_owner"
    SERVER_OWNER = "server_owner"
    NOBODY = "nobody"


class PermissionRequirement(ValueObject):
    """What an invoker must satisfy to run a command.

    Evaluated as three gates in order: special restrictions, external
    capabilities, internal permission bits.
    """

    special_restrictions: frozenset[SpecialRestriction] = Field(
        default_factory=frozenset
    )
    required_capabilities: frozenset[CapabilityType] = Field(
        default_factory=frozenset
    )
    permission_bits: int = 0

    @property
    def is_unrestricted(self) -> bool:
        return (
            not self.special_restrictions
            and not self.required_capabilities
            and self.permission_bits == 0
        )
