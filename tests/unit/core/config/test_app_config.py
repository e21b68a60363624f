import logging
from pathlib import Path

import pytest
import yaml
from botcmd.constants import (
    DEFAULT_COMMAND_PREFIX,
    DEFAULT_MAX_MACRO_DEPTH,
    DEFAULT_WORKER_THREADS,
)
from botcmd.core.common.exceptions import ConfigurationError
from botcmd.core.config.app_config import (
    BotCommandConfig,
    LogLevel,
    LoggingConfig,
    configure_logging,
    load_config,
)
from pydantic import ValidationError


def test_defaults() -> None:
    config = BotCommandConfig()
    assert config.command_prefix == DEFAULT_COMMAND_PREFIX
    assert config.max_macro_depth == DEFAULT_MAX_MACRO_DEPTH
    assert config.worker_threads == DEFAULT_WORKER_THREADS
    assert config.permission_denied_message == "You don't have permission."
    assert config.parse_error_prefix == "Error:\n"
    assert config.logging.level is LogLevel.INFO
    assert config.logging.log_file is None


@pytest.mark.parametrize("prefix", ["", "ab", " ", "a", "7", '"'])
def test_invalid_prefix_rejected(prefix: str) -> None:
    with pytest.raises(ValidationError):
        BotCommandConfig(command_prefix=prefix)


def test_negative_macro_depth_rejected() -> None:
    with pytest.raises(ValidationError):
        BotCommandConfig(max_macro_depth=-1)


def test_zero_macro_depth_allowed() -> None:
    assert BotCommandConfig(max_macro_depth=0).max_macro_depth == 0


def test_numeric_log_level() -> None:
    assert LoggingConfig(level=LogLevel.WARNING).numeric_level == logging.WARNING


class TestFromEnv:
    def test_empty_environment_gives_defaults(self) -> None:
        assert BotCommandConfig.from_env(environ={}) == BotCommandConfig()

    def test_overrides(self) -> None:
        config = BotCommandConfig.from_env(
            environ={
                "BOTCMD_COMMAND_PREFIX": "?",
                "BOTCMD_MAX_MACRO_DEPTH": "3",
                "BOTCMD_WORKER_THREADS": "2",
                "BOTCMD_LOG_LEVEL": "debug",
                "BOTCMD_LOG_FILE": "bot.log",
            }
        )
        assert config.command_prefix == "?"
        assert config.max_macro_depth == 3
        assert config.worker_threads == 2
        assert config.logging.level is LogLevel.DEBUG
        assert config.logging.log_file == "bot.log"

    def test_non_integer_falls_back_to_default(self) -> None:
        config = BotCommandConfig.from_env(environ={"BOTCMD_MAX_MACRO_DEPTH": "deep"})
        assert config.max_macro_depth == DEFAULT_MAX_MACRO_DEPTH


class TestLoadConfig:
    def test_without_file(self) -> None:
        assert load_config(environ={}) == BotCommandConfig()

    def test_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "botcmd.yaml"
        path.write_text(
            yaml.dump(
                {
                    "command_prefix": "$",
                    "permission_denied_message": "Nope.",
                    "logging": {"level": "WARNING"},
                }
            ),
            encoding="utf-8",
        )

        config = load_config(path, environ={})

        assert config.command_prefix == "$"
        assert config.permission_denied_message == "Nope."
        assert config.logging.level is LogLevel.WARNING
        assert config.max_macro_depth == DEFAULT_MAX_MACRO_DEPTH

    def test_environment_wins_over_file(self, tmp_path: Path) -> None:
        path = tmp_path / "botcmd.yml"
        path.write_text("command_prefix: '$'\nmax_macro_depth: 2\n", encoding="utf-8")

        config = load_config(path, environ={"BOTCMD_MAX_MACRO_DEPTH": "5"})

        assert config.command_prefix == "$"
        assert config.max_macro_depth == 5

    def test_nested_logging_merge(self, tmp_path: Path) -> None:
        path = tmp_path / "botcmd.yaml"
        path.write_text("logging:\n  log_file: file.log\n", encoding="utf-8")

        config = load_config(path, environ={"BOTCMD_LOG_LEVEL": "ERROR"})

        assert config.logging.log_file == "file.log"
        assert config.logging.level is LogLevel.ERROR

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "absent.yaml", environ={})
        assert config == BotCommandConfig()

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path, environ={}) == BotCommandConfig()

    def test_unsupported_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "botcmd.json"
        path.write_text("{}", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Unsupported configuration"):
            load_config(path, environ={})

    def test_non_mapping_file(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- one\n- two\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            load_config(path, environ={})

    def test_invalid_values(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("command_prefix: ab\n", encoding="utf-8")
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(path, environ={})
        assert "errors" in exc_info.value.details


class TestConfigureLogging:
    def test_environment_level_reaches_root_logger(self) -> None:
        config = load_config(environ={"BOTCMD_LOG_LEVEL": "WARNING"})

        configure_logging(config)

        assert logging.getLogger().level == logging.WARNING

    def test_log_file_from_yaml(self, tmp_path: Path) -> None:
        log_file = tmp_path / "botcmd.log"
        path = tmp_path / "botcmd.yaml"
        path.write_text(
            yaml.dump({"logging": {"level": "DEBUG", "log_file": str(log_file)}}),
            encoding="utf-8",
        )

        configure_logging(load_config(path, environ={}))
        logging.getLogger("botcmd.test").debug("configured from file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert logging.getLogger().level == logging.DEBUG
        assert "configured from file" in log_file.read_text(encoding="utf-8")
        # Release the file handle before tmp_path cleanup
        configure_logging(BotCommandConfig())
