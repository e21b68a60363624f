"""
Common exception classes for botcmd.

This module defines custom exception classes used throughout the command
interpreter for better error handling and categorization.
"""

from __future__ import annotations


class BotCommandError(Exception):
    """Base exception class for all command interpreter errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        **kwargs,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        # Attach any extra attributes provided for compatibility with callers/tests
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    def to_dict(self) -> dict:
        error_dict = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }

        # Include any additional attributes that were set via kwargs
        for attr_name in dir(self):
            if (
                not attr_name.startswith("_")
                and attr_name not in ["message", "details", "args"]
                and not callable(getattr(self, attr_name))
            ):
                error_dict[attr_name] = getattr(self, attr_name)

        return {"error": error_dict}


class ConfigurationError(BotCommandError):
    """Raised when the interpreter is set up incorrectly.

    Registration before the dispatcher is started and invalid command
    schemas end up here. Never shown to chat users.
    """

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
        **kwargs,
    ):
        super().__init__(message, details, **kwargs)


class ParsingError(BotCommandError):
    """Raised when an invocation's tokens do not fit the command schema.

    The message is user facing and is sent verbatim to the invoking channel.
    """

    def __init__(
        self,
        message: str = "Parsing failed",
        parameter_name: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        det = details.copy() if details else {}
        if parameter_name:
            det.setdefault("parameter_name", parameter_name)
        super().__init__(message, det, **kwargs)
        self.parameter_name = parameter_name


class CommandPermissionError(BotCommandError):
    """Raised when an invoker may not run a command."""

    def __init__(
        self,
        message: str = "Permission denied",
        command_name: str | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        det = details.copy() if details else {}
        if command_name:
            det.setdefault("command_name", command_name)
        super().__init__(message, det, **kwargs)
        self.command_name = command_name


class MacroExpansionError(BotCommandError):
    """Raised when macro re-dispatch goes deeper than the configured bound."""

    def __init__(
        self,
        message: str = "Macro expansion depth exceeded",
        depth: int | None = None,
        details: dict | None = None,
        **kwargs,
    ):
        det = details.copy() if details else {}
        if depth is not None:
            det.setdefault("depth", depth)
        super().__init__(message, det, **kwargs)
        self.depth = depth
