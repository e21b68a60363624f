from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import Field, field_validator

from botcmd.command_prefix import validate_command_prefix
from botcmd.constants import (
    DEFAULT_COMMAND_PREFIX,
    DEFAULT_MAX_MACRO_DEPTH,
    DEFAULT_PARSE_ERROR_PREFIX,
    DEFAULT_PERMISSION_DENIED_MESSAGE,
    DEFAULT_WORKER_THREADS,
    ConfigKey,
)
from botcmd.core.common.exceptions import ConfigurationError
from botcmd.core.interfaces.model_bases import DomainModel

logger = logging.getLogger(__name__)

ENV_PREFIX = "BOTCMD_"


def _env_to_int(name: str, default: int, env: Mapping[str, str]) -> int:
    """Return an environment variable parsed as an integer."""
    value = env.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-integer value %r for %s", value, name)
        return default


def _merge_dicts(base: dict[str, Any], override: Mapping[str, Any]) -> None:
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), dict):
            _merge_dicts(base[key], value)
        else:
            base[key] = value


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggingConfig(DomainModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.INFO
    log_file: str | None = None

    @property
    def numeric_level(self) -> int:
        return int(logging.getLevelName(self.level.value))


class BotCommandConfig(DomainModel):
    """Settings of the command interpreter."""

    command_prefix: str = DEFAULT_COMMAND_PREFIX
    # Deepest macro re-dispatch allowed; 0 disables macros entirely
    max_macro_depth: int = Field(default=DEFAULT_MAX_MACRO_DEPTH, ge=0)
    worker_threads: int = Field(default=DEFAULT_WORKER_THREADS, ge=1)
    permission_denied_message: str = DEFAULT_PERMISSION_DENIED_MESSAGE
    parse_error_prefix: str = DEFAULT_PARSE_ERROR_PREFIX
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("command_prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        err = validate_command_prefix(v)
        if err:
            raise ValueError(err)
        return v

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> BotCommandConfig:
        """Create a config from ``BOTCMD_*`` environment variables."""
        env: Mapping[str, str] = environ if environ is not None else os.environ
        return cls.model_validate(_env_overrides(env))


def _env_overrides(env: Mapping[str, str]) -> dict[str, Any]:
    """Collect only the settings the environment actually sets."""
    data: dict[str, Any] = {}

    prefix = env.get(f"{ENV_PREFIX}COMMAND_PREFIX")
    if prefix is not None:
        data[ConfigKey.COMMAND_PREFIX.value] = prefix

    for key, default in (
        (ConfigKey.MAX_MACRO_DEPTH, DEFAULT_MAX_MACRO_DEPTH),
        (ConfigKey.WORKER_THREADS, DEFAULT_WORKER_THREADS),
    ):
        name = f"{ENV_PREFIX}{key.value.upper()}"
        if name in env:
            data[key.value] = _env_to_int(name, default, env)

    logging_data: dict[str, Any] = {}
    level = env.get(f"{ENV_PREFIX}LOG_LEVEL")
    if level:
        logging_data["level"] = level.strip().upper()
    log_file = env.get(f"{ENV_PREFIX}LOG_FILE")
    if log_file:
        logging_data["log_file"] = log_file
    if logging_data:
        data[ConfigKey.LOGGING.value] = logging_data

    return data


def configure_logging(config: BotCommandConfig) -> None:
    """Configure logging based on configuration."""
    from botcmd.core.common.logging_utils import (
        configure_logging_with_environment_tagging,
    )

    configure_logging_with_environment_tagging(
        level=config.logging.numeric_level,
        log_file=config.logging.log_file,
    )


def load_config(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> BotCommandConfig:
    """
    Load configuration from defaults, an optional YAML file and the environment.

    Later sources win: environment over file over defaults. A ``.env`` file
    in the working directory is loaded when reading the real environment.

    Args:
        config_path: Optional path to a YAML configuration file
        environ: Environment mapping; defaults to ``os.environ``

    Returns:
        BotCommandConfig instance

    Raises:
        ConfigurationError: If the file has the wrong format or the merged
            settings are invalid.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    config_data: dict[str, Any] = BotCommandConfig().model_dump()

    if config_path:
        path = Path(config_path)
        if not path.exists():
            logger.warning(f"Configuration file not found: {config_path}")
        else:
            if path.suffix.lower() not in [".yaml", ".yml"]:
                raise ConfigurationError(
                    f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml)."
                )
            with open(path, encoding="utf-8") as f:
                file_config = yaml.safe_load(f) or {}
            if not isinstance(file_config, dict):
                raise ConfigurationError(
                    f"Configuration file {path} must contain a mapping"
                )
            _merge_dicts(config_data, file_config)

    _merge_dicts(config_data, _env_overrides(environ))

    try:
        return BotCommandConfig.model_validate(config_data)
    except ValueError as exc:
        logger.critical(f"Invalid configuration: {exc!s}")
        raise ConfigurationError(
            "Invalid configuration", details={"errors": str(exc)}
        ) from exc
