"""
Positional matching of tokens against a command's parameters.

Tokens and parameters are walked with two cursors. Each token is classified
by its shape, in a fixed order, and offered to the current parameter only:

1. integer literal     -> LONG, DOUBLE, USER (as an id) or STRING
2. decimal literal     -> DOUBLE or STRING
3. user mention        -> USER
4. channel mention     -> CHANNEL
5. contains whitespace -> USER (name lookup) or STRING
6. bare word           -> USER (name lookup) or STRING

No shape matches a BOOL parameter: an optional one is always skipped and a
required one always fails.

When the current parameter rejects the token and is optional, only the
parameter cursor moves, so the same token is offered to the next parameter.
A rejected token on a required parameter ends the match with a
``ParsingError``, as does an integer literal outside the signed 64-bit range
whatever the parameter. Tokens left over once the parameters run out are
ignored.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from botcmd.constants import LONG_MAX, LONG_MIN, RAW_ARGUMENT_NAME
from botcmd.core.common.exceptions import ParsingError
from botcmd.core.domain.arguments import (
    ArgumentBag,
    ArgumentValue,
    ChannelArgument,
    DoubleArgument,
    LongArgument,
    StringArgument,
    UserArgument,
)
from botcmd.core.domain.command_schema import CommandSchema
from botcmd.core.domain.parameters import ArgType, ParameterSpec
from botcmd.core.domain.references import ServerRef, UserRef
from botcmd.core.interfaces.directory_interface import IDirectory
from botcmd.core.services.tokenizer import tokenize

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"-?[0-9]+")
_DECIMAL_PATTERN = re.compile(r"-?(0|[1-9][0-9]*)(\.[0-9]+)?")
_USER_MENTION_PATTERN = re.compile(r"<@!?([0-9]+)>")
_CHANNEL_MENTION_PATTERN = re.compile(r"<#!?([0-9]+)>")


def describe_arity(minimum: int, maximum: int) -> str:
    """Render an accepted argument count: ``3``, ``2 or 3`` or ``2..5``."""
    if minimum == maximum:
        return str(maximum)
    if maximum - minimum == 1:
        return f"{minimum} or {maximum}"
    return f"{minimum}..{maximum}"


def _bad_type(parameter: ParameterSpec) -> ParsingError:
    return ParsingError(
        f"Bad argument type for non-optional parameter {parameter.name}, "
        f"I expected {parameter.type.name}",
        parameter_name=parameter.name,
    )


class ParameterMatcher:
    """Turns command text into an :class:`ArgumentBag` for a schema."""

    def __init__(self, directory: IDirectory) -> None:
        self._directory = directory

    def match(
        self, schema: CommandSchema, text: str, server: ServerRef, prefix: str
    ) -> ArgumentBag:
        """Match the full command text (prefix and name included) to ``schema``.

        Raises:
            ParsingError: If the text does not fit the schema.
        """
        if schema.raw:
            return self.match_raw(schema, text, prefix)
        return self.match_tokens(tokenize(text), schema.parameters, server)

    def match_raw(self, schema: CommandSchema, text: str, prefix: str) -> ArgumentBag:
        """Everything after the name and one separator becomes ``raw``."""
        offset = len(prefix) + len(schema.name) + 1
        if len(text) < offset:
            return ArgumentBag()
        return ArgumentBag(
            {RAW_ARGUMENT_NAME: StringArgument(RAW_ARGUMENT_NAME, text[offset:])}
        )

    def match_tokens(
        self,
        tokens: Sequence[str],
        parameters: Sequence[ParameterSpec],
        server: ServerRef,
    ) -> ArgumentBag:
        """Match already tokenized arguments (command name excluded)."""
        arguments: dict[str, ArgumentValue] = {}
        token_pos = 0
        param_pos = 0

        while token_pos < len(tokens) and param_pos < len(parameters):
            token = tokens[token_pos]
            parameter = parameters[param_pos]
            param_pos += 1

            argument = self._classify(token, parameter, server)
            if argument is None:
                if parameter.optional:
                    # Retry the same token against the next parameter
                    continue
                raise _bad_type(parameter)

            arguments[parameter.name] = argument
            token_pos += 1

        minimum = sum(1 for p in parameters if not p.optional)
        if len(arguments) < minimum:
            expected = describe_arity(minimum, len(parameters))
            raise ParsingError(
                f"Not enough arguments. I expected {expected} but you gave {len(arguments)}.",
                details={"expected": expected, "given": len(arguments)},
            )

        if token_pos < len(tokens):
            logger.debug(
                "Ignoring %d surplus token(s)", len(tokens) - token_pos
            )

        return ArgumentBag(arguments)

    def _classify(
        self, token: str, parameter: ParameterSpec, server: ServerRef
    ) -> ArgumentValue | None:
        """Offer ``token`` to ``parameter``.

        Returns the argument if the parameter accepts the token's shape and
        None if it does not. Malformed numbers raise straight away.
        """
        name = parameter.name
        kind = parameter.type

        if _INTEGER_PATTERN.fullmatch(token):
            value = int(token)
            if not LONG_MIN <= value <= LONG_MAX:
                raise ParsingError(
                    f"Bad argument format for long integer parameter {name}, value is out of range",
                    parameter_name=name,
                )
            if kind is ArgType.LONG:
                return LongArgument(name, value)
            if kind is ArgType.DOUBLE:
                return DoubleArgument(name, float(value))
            if kind is ArgType.USER:
                return UserArgument(
                    name, self._directory.resolve_user_by_id(server, token)
                )
            if kind is ArgType.STRING:
                return StringArgument(name, token)
            return None

        if _DECIMAL_PATTERN.fullmatch(token):
            try:
                decimal = float(token)
            except ValueError:
                raise ParsingError(
                    f"Bad argument format for floating point parameter {name}, value is malformed",
                    parameter_name=name,
                ) from None
            if kind is ArgType.DOUBLE:
                return DoubleArgument(name, decimal)
            if kind is ArgType.STRING:
                return StringArgument(name, token)
            return None

        mention = _USER_MENTION_PATTERN.fullmatch(token)
        if mention:
            if kind is not ArgType.USER:
                return None
            return UserArgument(
                name, self._directory.resolve_user_by_id(server, mention.group(1))
            )

        mention = _CHANNEL_MENTION_PATTERN.fullmatch(token)
        if mention:
            if kind is not ArgType.CHANNEL:
                return None
            return ChannelArgument(
                name, self._directory.resolve_channel_by_id(server, mention.group(1))
            )

        if any(c.isspace() for c in token):
            # Only a quoted span can carry whitespace
            if kind is ArgType.USER:
                return UserArgument(name, self._find_user(server, token))
            if kind is ArgType.STRING:
                return StringArgument(name, token)
            return None

        if kind is ArgType.USER:
            return UserArgument(name, self._find_user(server, token))
        if kind is ArgType.STRING:
            return StringArgument(name, token)
        return None

    def _find_user(self, server: ServerRef, name: str) -> UserRef | None:
        # A lookup miss is not an error; the task sees a null user
        candidates = self._directory.resolve_users_by_name(server, name)
        return candidates[0] if candidates else None
