from enum import Enum

DEFAULT_COMMAND_PREFIX: str = "!"

DEFAULT_PERMISSION_DENIED_MESSAGE: str = "You don't have permission."
DEFAULT_PARSE_ERROR_PREFIX: str = "Error:\n"
DEFAULT_MAX_MACRO_DEPTH: int = 8
DEFAULT_WORKER_THREADS: int = 4

UNKNOWN_COMMAND_TEXT: str = "Unknown command"
DEFAULT_TOOLTIP: str = "No tooltip"
DEFAULT_LONG_HELP: str = "No help"
PERMISSION_DENIED_GLYPH: str = "\U0001F6AB"

RAW_ARGUMENT_NAME: str = "raw"

# Internal permission bits. Requirements at or below ADMIN_RANGE_CEILING
# are satisfied by holding ADMIN_BITS.
MODERATOR_BITS: int = 0x1
ADMIN_BITS: int = 0x2
MOD_OR_ADMIN_BITS: int = 0x3
ADMIN_RANGE_CEILING: int = ADMIN_BITS

LONG_MIN: int = -(2**63)
LONG_MAX: int = 2**63 - 1


class ConfigKey(str, Enum):
    """Enum for configuration keys."""

    COMMAND_PREFIX = "command_prefix"
    MAX_MACRO_DEPTH = "max_macro_depth"
    WORKER_THREADS = "worker_threads"
    PERMISSION_DENIED_MESSAGE = "permission_denied_message"
    PARSE_ERROR_PREFIX = "parse_error_prefix"
    LOGGING = "logging"
