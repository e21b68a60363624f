"""
Command schemas and the fluent builder used to declare them.

Schema authors chain builder calls and finish with ``build()``:

```python
schema = (
    CommandBuilder("kick")
    .arg(ArgType.USER, "target")
    .arg(ArgType.STRING, "reason", optional=True)
    .tip("Kick a member")
    .warn(HelpWarning.DESTRUCTIVE)
    .restrict_internal(MODERATOR_BITS)
    .runs(kick_task)
    .build()
)
```

The builder is mutable; the ``CommandSchema`` it returns is not, so a
registered schema never changes behind the registry's back.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

from pydantic import Field

from botcmd.constants import DEFAULT_LONG_HELP, DEFAULT_TOOLTIP
from botcmd.core.common.exceptions import ConfigurationError
from botcmd.core.domain.base import ValueObject
from botcmd.core.domain.invocation import InvocationContext
from botcmd.core.domain.parameters import ArgType, ParameterSpec
from botcmd.core.domain.permissions import (
    CapabilityType,
    PermissionRequirement,
    SpecialRestriction,
)

CommandTask = Callable[[InvocationContext], Any]


class HelpWarning(Enum):
    """Badges shown next to a command's help text."""

    MIGHT_MENTION = ("\U0001F5EF", "Might mention other users.")
    TIME_CONSUMING = ("\U0001F557", "Might run for a long time.")
    DESTRUCTIVE = ("⚠", "Might perform irreversible changes.")

    def __init__(self, glyph: str, message: str) -> None:
        self.glyph = glyph
        self.message = message


class CommandSchema(ValueObject):
    """A registered command: its parameters, behaviour and restrictions."""

    name: str
    parameters: tuple[ParameterSpec, ...] = ()
    raw: bool = False
    task: Callable[..., Any]
    tooltip: str = DEFAULT_TOOLTIP
    long_help: str = DEFAULT_LONG_HELP
    warnings: tuple[HelpWarning, ...] = ()
    permissions: PermissionRequirement = Field(default_factory=PermissionRequirement)


class CommandBuilder:
    """Fluent builder for :class:`CommandSchema`."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._parameters: list[ParameterSpec] = []
        self._raw = False
        self._task: CommandTask | None = None
        self._tooltip = DEFAULT_TOOLTIP
        self._long_help = DEFAULT_LONG_HELP
        self._warnings: list[HelpWarning] = []
        self._permission_bits = 0
        self._capabilities: frozenset[CapabilityType] = frozenset()
        self._special: set[SpecialRestriction] = set()

    def arg(self, arg_type: ArgType, name: str, optional: bool = False) -> CommandBuilder:
        self._parameters.append(ParameterSpec(type=arg_type, name=name, optional=optional))
        return self

    def raw(self) -> CommandBuilder:
        """Pass everything after the command name through as one ``raw`` string."""
        self._raw = True
        return self

    def runs(self, task: CommandTask) -> CommandBuilder:
        self._task = task
        return self

    def tip(self, tooltip: str) -> CommandBuilder:
        self._tooltip = tooltip
        return self

    def help(self, long_help: str) -> CommandBuilder:
        self._long_help = long_help
        return self

    def warn(self, *warnings: HelpWarning) -> CommandBuilder:
        self._warnings.extend(warnings)
        return self

    def restrict_internal(self, permission_bits: int) -> CommandBuilder:
        self._permission_bits = permission_bits
        return self

    def restrict_external(
        self, *required: CapabilityType | Iterable[CapabilityType]
    ) -> CommandBuilder:
        """Require platform capabilities, given as varargs or one iterable."""
        if len(required) == 1 and not isinstance(required[0], str):
            self._capabilities = frozenset(required[0])
        else:
            self._capabilities = frozenset(required)  # type: ignore[arg-type]
        return self

    def restrict_special(self, restriction: SpecialRestriction) -> CommandBuilder:
        self._special.add(restriction)
        return self

    def build(self) -> CommandSchema:
        """Validate and freeze the declaration.

        Raises:
            ConfigurationError: If the name is empty or contains whitespace,
                parameter names repeat, or no task was set.
        """
        if not self._name or any(c.isspace() for c in self._name):
            raise ConfigurationError(
                f"Invalid command name {self._name!r}",
                details={"command_name": self._name},
            )

        seen: set[str] = set()
        for parameter in self._parameters:
            if parameter.name in seen:
                raise ConfigurationError(
                    f"Duplicate parameter '{parameter.name}' in command '{self._name}'",
                    details={"command_name": self._name},
                )
            seen.add(parameter.name)

        if self._task is None:
            raise ConfigurationError(
                f"Command '{self._name}' has no task",
                details={"command_name": self._name},
            )

        return CommandSchema(
            name=self._name,
            parameters=tuple(self._parameters),
            raw=self._raw,
            task=self._task,
            tooltip=self._tooltip,
            long_help=self._long_help,
            warnings=tuple(self._warnings),
            permissions=PermissionRequirement(
                special_restrictions=frozenset(self._special),
                required_capabilities=self._capabilities,
                permission_bits=self._permission_bits,
            ),
        )
