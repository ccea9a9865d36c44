"""Tests for configuration loading and logging setup."""

import logging
from pathlib import Path

import pytest

from safe_input.config import Config
from safe_input.utils.logging import setup_logging


class TestConfig:
    """Test cases for Config.from_env."""

    def test_defaults(self, env_file) -> None:
        config = Config.from_env(env_file())
        assert config.log_path is None
        assert config.log_level == logging.INFO
        assert config.allow_nav is False
        assert config.require_protocol is True

    def test_values_from_env_file(self, env_file, tmp_path: Path) -> None:
        path = env_file(
            SAFE_INPUT_LOG_PATH=str(tmp_path / "logs"),
            SAFE_INPUT_LOG_LEVEL="debug",
            SAFE_INPUT_ALLOW_NAV="yes",
            SAFE_INPUT_REQUIRE_PROTOCOL="0",
        )
        config = Config.from_env(path)
        assert config.log_path == tmp_path / "logs"
        assert config.log_level == logging.DEBUG
        assert config.allow_nav is True
        assert config.require_protocol is False

    def test_environment_overrides_file(self, env_file, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SAFE_INPUT_ALLOW_NAV", "true")
        config = Config.from_env(env_file(SAFE_INPUT_ALLOW_NAV="false"))
        assert config.allow_nav is True

    def test_invalid_boolean(self, env_file) -> None:
        with pytest.raises(ValueError, match="SAFE_INPUT_ALLOW_NAV"):
            Config.from_env(env_file(SAFE_INPUT_ALLOW_NAV="maybe"))

    def test_invalid_log_level(self, env_file) -> None:
        with pytest.raises(ValueError, match="log level"):
            Config.from_env(env_file(SAFE_INPUT_LOG_LEVEL="LOUD"))


class TestSetupLogging:
    """Test cases for setup_logging."""

    def test_console_only_by_default(self) -> None:
        logger = setup_logging(level=logging.WARNING)
        assert logger.name == "safe_input"
        assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)
        console = [h for h in logger.handlers if type(h) is logging.StreamHandler][-1]
        assert console.level == logging.WARNING

    def test_file_handler_when_log_path_given(self, tmp_path: Path) -> None:
        log_dir = tmp_path / "logs"
        logger = setup_logging(log_dir, logging.INFO)
        logger.debug("written to file only")
        for handler in logger.handlers:
            handler.flush()

        log_files = list(log_dir.glob("safe_input_*.log"))
        assert len(log_files) == 1
        assert "written to file only" in log_files[0].read_text()
