from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import logging
import os

from dotenv import load_dotenv

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class Config:
    """Command-line defaults loaded from environment variables."""

    log_path: Optional[Path] = None
    log_level: int = logging.INFO
    allow_nav: bool = False
    require_protocol: bool = True

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "Config":
        """Load configuration from environment variables."""
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        def bool_env(name: str, default: bool) -> bool:
            value = os.getenv(name)
            if value is None or value.strip() == "":
                return default
            value = value.strip().lower()
            if value in TRUE_VALUES:
                return True
            if value in FALSE_VALUES:
                return False
            raise ValueError(f"Invalid boolean for {name}: {value}")

        def level_env(name: str, default: str) -> int:
            value = os.getenv(name, default).strip().upper()
            level = logging.getLevelName(value)
            if not isinstance(level, int):
                raise ValueError(f"Invalid log level for {name}: {value}")
            return level

        log_path = os.getenv("SAFE_INPUT_LOG_PATH")

        return cls(
            log_path=Path(log_path) if log_path else None,
            log_level=level_env("SAFE_INPUT_LOG_LEVEL", "INFO"),
            allow_nav=bool_env("SAFE_INPUT_ALLOW_NAV", False),
            require_protocol=bool_env("SAFE_INPUT_REQUIRE_PROTOCOL", True),
        )
