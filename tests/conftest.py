"""Pytest configuration and fixtures."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

ENV_PREFIX = "SAFE_INPUT_"


@pytest.fixture(autouse=True)
def clean_environment() -> None:
    """Keep SAFE_INPUT_* variables from leaking between tests.

    load_dotenv writes straight into os.environ, so anything a test loads
    has to be removed afterwards as well.
    """
    for name in [k for k in os.environ if k.startswith(ENV_PREFIX)]:
        del os.environ[name]
    yield
    for name in [k for k in os.environ if k.startswith(ENV_PREFIX)]:
        del os.environ[name]


@pytest.fixture(autouse=True)
def reset_logger() -> None:
    """Remove handlers added by setup_logging during a test."""
    logger = logging.getLogger("safe_input")
    before = list(logger.handlers)
    yield
    for handler in list(logger.handlers):
        if handler not in before:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def env_file(tmp_path: Path):
    """Write a .env file in a temp directory and return its path."""

    def write(**values: str) -> Path:
        path = tmp_path / ".env"
        path.write_text("".join(f"{key}={value}\n" for key, value in values.items()))
        return path

    return write
