"""
Help texts for registered commands.

Short form: ``name: tooltip`` followed directly by the warning glyphs.
Long form:  ``name (type param, type param?): tooltip`` then the long help
on the next line, then one ``glyph message`` line per warning.
Rendered for a specific user, either form gets a 🚫 prefix when the user
may not run the command.
"""

from __future__ import annotations

from botcmd.constants import PERMISSION_DENIED_GLYPH, UNKNOWN_COMMAND_TEXT
from botcmd.core.domain.command_schema import CommandSchema
from botcmd.core.domain.references import ServerRef, UserRef
from botcmd.core.services.command_registry import CommandRegistry
from botcmd.core.services.permission_evaluator import PermissionEvaluator


def short_help(schema: CommandSchema) -> str:
    base = f"{schema.name}: {schema.tooltip}"
    if not schema.warnings:
        return base
    return base + " ".join(w.glyph for w in schema.warnings)


def long_help(schema: CommandSchema) -> str:
    params = ", ".join(p.describe() for p in schema.parameters)
    base = f"{schema.name} ({params}): {schema.tooltip}\n{schema.long_help}"
    if not schema.warnings:
        return base
    return base + "\n" + "\n".join(f"{w.glyph} {w.message}" for w in schema.warnings)


class HelpFormatter:
    """Renders help texts with the reader's permissions taken into account."""

    def __init__(self, registry: CommandRegistry, evaluator: PermissionEvaluator) -> None:
        self._registry = registry
        self._evaluator = evaluator

    def _denied_prefix(self, schema: CommandSchema, server: ServerRef, user: UserRef) -> str:
        if self._evaluator.is_allowed(schema.permissions, server, user):
            return ""
        return f"{PERMISSION_DENIED_GLYPH} "

    def short_help_for(self, schema: CommandSchema, server: ServerRef, user: UserRef) -> str:
        return self._denied_prefix(schema, server, user) + short_help(schema)

    def long_help_for(self, schema: CommandSchema, server: ServerRef, user: UserRef) -> str:
        return self._denied_prefix(schema, server, user) + long_help(schema)

    def tooltip(self, name: str, server: ServerRef, user: UserRef) -> str:
        schema = self._registry.get(name)
        if schema is None:
            return UNKNOWN_COMMAND_TEXT
        return self.short_help_for(schema, server, user)

    def help(self, name: str, server: ServerRef, user: UserRef) -> str:
        schema = self._registry.get(name)
        if schema is None:
            return UNKNOWN_COMMAND_TEXT
        return self.long_help_for(schema, server, user)

    def tooltip_summary(self, server: ServerRef, user: UserRef) -> str:
        """One tooltip line per registered command, sorted by name."""
        commands = self._registry.get_all()
        return "\n".join(
            self.short_help_for(commands[name], server, user) for name in sorted(commands)
        )
