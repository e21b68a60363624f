from __future__ import annotations

from enum import Enum

from botcmd.core.domain.base import ValueObject


class ArgType(str, Enum):
    """Types a command parameter can declare."""

    LONG = "long"
    DOUBLE = "double"
    BOOL = "bool"
    STRING = "string"
    USER = "user"
    CHANNEL = "channel"


class ParameterSpec(ValueObject):
    """One positional parameter of a command schema."""

    type: ArgType
    name: str
    optional: bool = False

    def describe(self) -> str:
        """Render as used in long help, e.g. ``user target?``."""
        return f"{self.type.value} {self.name}{'?' if self.optional else ''}"
