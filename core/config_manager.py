"""
Configuration Manager for DevJourney.

Central place for system constants. Every tunable value is declared here
with its default and can be overridden from config/runtime.yaml.

Usage:
    from core.config_manager import config
    step = config.PROGRESS_STEP
"""
from dataclasses import dataclass
from pathlib import Path

import yaml

from core.exceptions import ConfigError
from core.logger import get_logger


CONFIG_DIR = Path(__file__).parent.parent / "config"
RUNTIME_CONFIG_PATH = CONFIG_DIR / "runtime.yaml"

logger = get_logger("config")


@dataclass
class SystemConfig:
    """
    Runtime constants.

    Defaults describe the stock dashboard behavior.
    """

    # === Storage ===

    # Namespace for every persisted key ("devjourney-coding-goals", ...)
    KEY_PREFIX: str = "devjourney"

    # Envelope version written with every record
    SCHEMA_VERSION: str = "1.0"

    # File used by JsonFileStore inside the data directory
    STORE_FILENAME: str = "devjourney_store.json"

    # === Wellness ===

    # Walking distance estimate: 0.05 km per minute (~3 km/h)
    DISTANCE_PER_MINUTE_KM: float = 0.05

    MOOD_MIN: int = 1
    MOOD_MAX: int = 10

    # === Language progress ===

    PROGRESS_MIN: int = 0
    PROGRESS_MAX: int = 100

    # Size of the +/- buttons in the dashboard
    PROGRESS_STEP: int = 5

    # === Remote APIs ===

    GITHUB_API_BASE: str = "https://api.github.com"
    QUOTABLE_API_BASE: str = "https://api.quotable.io"

    # Upper bound for every remote request; a stalled call fails over to its fallback
    HTTP_TIMEOUT_SECONDS: float = 10.0

    # Seconds of artificial delay in the sample music catalog
    MUSIC_SIMULATED_LATENCY: float = 0.3


def _load_runtime_config() -> dict:
    """Load runtime overrides if present."""
    if not RUNTIME_CONFIG_PATH.exists():
        return {}

    try:
        with open(RUNTIME_CONFIG_PATH, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        logger.warning(f"Ignoring unreadable runtime config {RUNTIME_CONFIG_PATH}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring runtime config {RUNTIME_CONFIG_PATH}: top level is not a mapping")
        return {}
    return data


def get_config() -> SystemConfig:
    """
    Build the system configuration.

    Priority: runtime.yaml > defaults
    """
    base = SystemConfig()
    overrides = _load_runtime_config()

    for key, value in overrides.items():
        if not hasattr(base, key):
            logger.warning(f"Unknown config key in runtime.yaml: {key}")
            continue

        default = getattr(base, key)
        # ints are accepted where a float is expected
        expected = (int, float) if isinstance(default, float) else type(default)
        if (isinstance(value, bool) and not isinstance(default, bool)) or not isinstance(value, expected):
            raise ConfigError(
                f"{key} must be {type(default).__name__}, got {value!r}",
                config_path=str(RUNTIME_CONFIG_PATH),
            )
        setattr(base, key, value)

    return base


config = get_config()
