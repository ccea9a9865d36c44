import logging
from datetime import datetime
from pathlib import Path
from typing import Optional


def setup_logging(log_path: Optional[Path] = None, level: int = logging.INFO) -> logging.Logger:
    """Configure logging for the safe-input command line."""
    logger = logging.getLogger("safe_input")
    logger.setLevel(logging.DEBUG)

    # Console handler - requested level, on stderr so stdout carries only results
    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(console)

    # File handler - DEBUG level, only when a log directory is configured
    if log_path is not None:
        log_path.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        file_handler = logging.FileHandler(log_path / f"safe_input_{timestamp}.log")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    return logger
