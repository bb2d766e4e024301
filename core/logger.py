"""
DevJourney logging setup.

Logging layout:
- logs/system.log: regular operation log (INFO+)
- logs/error.log: exception traces (ERROR/CRITICAL)
- console: only what is useful to the user (WARNING+)

RotatingFileHandler keeps the log files bounded.
"""
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGS_DIR = Path(__file__).parent.parent / "logs"

MAX_BYTES = 5 * 1024 * 1024  # 5MB
BACKUP_COUNT = 3

ROOT_LOGGER_NAME = "devjourney"

# Set by setup_logging(logs_dir=...); None means LOGS_DIR
_active_logs_dir: Optional[Path] = None


def setup_logging(
    log_level: int = logging.INFO,
    console_level: int = logging.WARNING,
    logs_dir: Optional[Path] = None
) -> logging.Logger:
    """
    Initialize the logging system.

    Args:
        log_level: file log level (default INFO)
        console_level: console log level (default WARNING)
        logs_dir: override for the log directory

    Returns:
        The configured root "devjourney" logger
    """
    global _active_logs_dir
    target_dir = logs_dir or LOGS_DIR
    target_dir.mkdir(parents=True, exist_ok=True)
    _active_logs_dir = target_dir

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)  # handlers do the filtering

    # avoid duplicate handlers on repeated setup
    logger.handlers.clear()

    file_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    console_format = logging.Formatter(
        "[%(levelname)s] %(message)s"
    )

    system_handler = RotatingFileHandler(
        target_dir / "system.log",
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8"
    )
    system_handler.setLevel(log_level)
    system_handler.setFormatter(file_format)
    logger.addHandler(system_handler)

    error_handler = RotatingFileHandler(
        target_dir / "error.log",
        maxBytes=MAX_BYTES,
        backupCount=BACKUP_COUNT,
        encoding="utf-8"
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(file_format)
    logger.addHandler(error_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return a module logger.

    Args:
        name: module name, e.g. "store", "quotes_client"

    Returns:
        Child logger of the "devjourney" root logger
    """
    if name:
        return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
    return logging.getLogger(ROOT_LOGGER_NAME)


def log_corruption(key: str, raw_value: str, error_msg: str) -> None:
    """
    Record an unreadable persisted value in the dedicated corruption log.

    Args:
        key: store key holding the bad value
        raw_value: raw stored text
        error_msg: description of the failure
    """
    logger = get_logger("store")
    target_dir = _active_logs_dir or LOGS_DIR
    corruption_log_path = target_dir / "corruption_dump.log"

    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        with open(corruption_log_path, "a", encoding="utf-8") as f:
            timestamp = datetime.now().isoformat()
            f.write(f"[{timestamp}] Key {key}: {error_msg}\n")
            f.write(f"  Raw: {raw_value[:500]}\n")
            f.write("-" * 50 + "\n")
    except OSError as e:
        logger.warning(f"Could not write corruption dump {corruption_log_path}: {e}")

    logger.warning(f"Corrupt value under '{key}': {error_msg}")
