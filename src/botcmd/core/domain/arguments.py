"""
Typed argument values produced by matching an invocation against a schema.

Each parameter type has its own frozen value class; ``ArgumentValue`` is the
union over all of them. Consumers narrow with ``isinstance`` or through the
typed accessors on ``ArgumentBag``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import ClassVar, TypeVar, Union

from botcmd.core.domain.parameters import ArgType
from botcmd.core.domain.references import ChannelRef, UserRef


@dataclass(frozen=True, slots=True)
class LongArgument:
    name: str
    value: int
    kind: ClassVar[ArgType] = ArgType.LONG


@dataclass(frozen=True, slots=True)
class DoubleArgument:
    name: str
    value: float
    kind: ClassVar[ArgType] = ArgType.DOUBLE


@dataclass(frozen=True, slots=True)
class BoolArgument:
    name: str
    value: bool
    kind: ClassVar[ArgType] = ArgType.BOOL


@dataclass(frozen=True, slots=True)
class StringArgument:
    name: str
    value: str
    kind: ClassVar[ArgType] = ArgType.STRING


@dataclass(frozen=True, slots=True)
class UserArgument:
    """A user parameter; ``value`` is None when the directory had no match."""

    name: str
    value: UserRef | None
    kind: ClassVar[ArgType] = ArgType.USER


@dataclass(frozen=True, slots=True)
class ChannelArgument:
    """A channel parameter; ``value`` is None when the directory had no match."""

    name: str
    value: ChannelRef | None
    kind: ClassVar[ArgType] = ArgType.CHANNEL


ArgumentValue = Union[
    LongArgument,
    DoubleArgument,
    BoolArgument,
    StringArgument,
    UserArgument,
    ChannelArgument,
]

_A = TypeVar(
    "_A",
    LongArgument,
    DoubleArgument,
    BoolArgument,
    StringArgument,
    UserArgument,
    ChannelArgument,
)


class ArgumentBag(Mapping[str, ArgumentValue]):
    """Matched arguments of a single invocation, keyed by parameter name."""

    def __init__(self, arguments: Mapping[str, ArgumentValue] | None = None) -> None:
        self._arguments: dict[str, ArgumentValue] = dict(arguments or {})

    def __getitem__(self, name: str) -> ArgumentValue:
        return self._arguments[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._arguments)

    def __len__(self) -> int:
        return len(self._arguments)

    def __repr__(self) -> str:
        return f"ArgumentBag({self._arguments!r})"

    def _typed(self, name: str, cls: type[_A]) -> _A | None:
        argument = self._arguments.get(name)
        if isinstance(argument, cls):
            return argument
        return None

    def get_long(self, name: str) -> int | None:
        argument = self._typed(name, LongArgument)
        return argument.value if argument is not None else None

    def get_double(self, name: str) -> float | None:
        argument = self._typed(name, DoubleArgument)
        return argument.value if argument is not None else None

    def get_bool(self, name: str) -> bool | None:
        argument = self._typed(name, BoolArgument)
        return argument.value if argument is not None else None

    def get_string(self, name: str) -> str | None:
        argument = self._typed(name, StringArgument)
        return argument.value if argument is not None else None

    def get_user(self, name: str) -> UserRef | None:
        argument = self._typed(name, UserArgument)
        return argument.value if argument is not None else None

    def get_channel(self, name: str) -> ChannelRef | None:
        argument = self._typed(name, ChannelArgument)
        return argument.value if argument is not None else None
