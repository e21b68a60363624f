"""
Server-scoped text macros.

A macro body holds one or more ``;``-separated command templates. In each
template ``$1``..``$N`` stand for the arguments of the invocation that named
the macro and ``$user`` for the invoker's id:

    body:    "!say $1 $user; !ping"
    invoked: "!greet x" by user 42
    result:  ["!say x 42", "!ping"]

Placeholders with no matching argument are left as they are.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from botcmd.core.domain.references import ServerRef
from botcmd.core.interfaces.supplier_interface import MacroResolver

logger = logging.getLogger(__name__)

TEMPLATE_SEPARATOR = ";"

_PLACEHOLDER_PATTERN = re.compile(r"\$(?:([0-9]+)|user)")


def expand_macro(body: str, arguments: Sequence[str], user_id: str) -> list[str]:
    """Substitute placeholders in every template of ``body``.

    ``arguments`` are the tokens of the original invocation, command name
    excluded. Templates are stripped; blank ones are dropped.
    """

    def substitute(match: re.Match[str]) -> str:
        index = match.group(1)
        if index is None:
            return user_id
        position = int(index)
        if 1 <= position <= len(arguments):
            return arguments[position - 1]
        return match.group(0)

    commands: list[str] = []
    for template in body.split(TEMPLATE_SEPARATOR):
        template = template.strip()
        if not template:
            continue
        commands.append(_PLACEHOLDER_PATTERN.sub(substitute, template))
    return commands


class MacroExpander:
    """Looks macros up through the host's resolver and expands them."""

    def __init__(self, resolver: MacroResolver | None = None) -> None:
        self._resolver = resolver

    def lookup(self, server: ServerRef, name: str) -> str | None:
        if self._resolver is None:
            return None
        return self._resolver(server, name)

    def expand(
        self,
        server: ServerRef,
        name: str,
        arguments: Sequence[str],
        user_id: str,
    ) -> list[str] | None:
        """Return the commands macro ``name`` expands to, or None if unknown."""
        body = self.lookup(server, name)
        if body is None:
            return None
        commands = expand_macro(body, arguments, user_id)
        logger.debug("Macro %s expanded to %d command(s)", name, len(commands))
        return commands
