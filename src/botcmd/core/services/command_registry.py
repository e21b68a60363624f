"""
Name to schema map shared by every dispatch thread.
"""

from __future__ import annotations

import logging
import threading

from botcmd.core.common.exceptions import ConfigurationError
from botcmd.core.domain.command_schema import CommandSchema

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Registry for command schemas.

    Lookups take no lock; inserts are serialized. Schemas are immutable, so
    a reader sees either the old or the new schema for a name, never a mix.
    There is no removal.
    """

    def __init__(self) -> None:
        """Initialize the command registry."""
        self._commands: dict[str, CommandSchema] = {}
        self._lock = threading.Lock()
        self._active = False

    def activate(self) -> None:
        """Allow registration; called once the dispatcher is listening."""
        self._active = True

    @property
    def is_active(self) -> bool:
        return self._active

    def register(self, schema: CommandSchema) -> None:
        """Register a command schema, replacing one of the same name.

        Args:
            schema: The finished schema to register

        Raises:
            ConfigurationError: If the registry has not been activated yet
        """
        if not self._active:
            raise ConfigurationError(
                f"Cannot register command '{schema.name}' before the dispatcher is started",
                details={"command_name": schema.name},
            )

        with self._lock:
            replaced = schema.name in self._commands
            self._commands[schema.name] = schema
        if replaced:
            logger.info(f"Replaced command: {schema.name}")
        else:
            logger.info(f"Registered command: {schema.name}")

    def get(self, name: str) -> CommandSchema | None:
        """Get a command schema by name.

        Args:
            name: The name of the command

        Returns:
            The schema or None if not found
        """
        return self._commands.get(name)

    def get_all(self) -> dict[str, CommandSchema]:
        """Get all registered commands.

        Returns:
            A dictionary of command name to schema
        """
        with self._lock:
            return self._commands.copy()

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)
