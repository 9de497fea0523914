"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass, field
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

DEFAULT_SOURCE_NAME = "DiceThrowLibrary"
DEFAULT_BATCH_SIZE = 99
DEFAULT_RECENT_CAPACITY = 500


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str) -> list[str]:
    """Read a comma-separated list from the environment."""
    value = os.getenv(name, "")
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Runtime settings, usually read from the environment."""

    source_name: str = DEFAULT_SOURCE_NAME
    batch_size: int = DEFAULT_BATCH_SIZE
    debug_sink_enabled: bool = True
    recent_capacity: int = DEFAULT_RECENT_CAPACITY
    log_level: str = "INFO"
    log_file: str | None = None
    log_to_console: bool = True
    api_host: str = "localhost"
    api_port: int = 8000
    cors_origins: list[str] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        return cls(
            source_name=os.getenv("EVENT_SOURCE_NAME", DEFAULT_SOURCE_NAME),
            batch_size=int(os.getenv("DICE_BATCH_SIZE", str(DEFAULT_BATCH_SIZE))),
            debug_sink_enabled=_env_flag("DEBUG_SINK_ENABLED", True),
            recent_capacity=int(
                os.getenv("RECENT_EVENTS_CAPACITY", str(DEFAULT_RECENT_CAPACITY))
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE") or None,
            log_to_console=_env_flag("LOG_TO_CONSOLE", True),
            api_host=os.getenv("API_HOST", "localhost"),
            api_port=int(os.getenv("API_PORT", "8000")),
            cors_origins=_env_list("CORS_ORIGINS"),
        )
