# Configuration package

from botcmd.core.config.app_config import (
    BotCommandConfig,
    LoggingConfig,
    LogLevel,
    configure_logging,
    load_config,
)

__all__ = [
    "BotCommandConfig",
    "LogLevel",
    "LoggingConfig",
    "configure_logging",
    "load_config",
]
