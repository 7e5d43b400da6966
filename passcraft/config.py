"""
Runtime settings for passcraft, read from ``PASSCRAFT_*`` environment variables.
"""

from dataclasses import dataclass
import os

from .log import get_logger
from .options import MAX_LENGTH, MIN_LENGTH

logger = get_logger(__name__)


@dataclass(frozen=True)
class Settings:
    # Initial password length for the CLI and the web page.
    default_length: int = 16

    log_level: str = "WARNING"

    # JSON log lines instead of the console renderer.
    log_json: bool = False


DEFAULT_SETTINGS = Settings()

_TRUTHY = {"1", "true", "yes", "on"}
_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def load_settings(environ=None) -> Settings:
    """Build :class:`Settings` from *environ* (defaults to ``os.environ``).

    Values that fail to parse fall back to the defaults; lengths are clamped
    into the allowed range.
    """
    env = os.environ if environ is None else environ

    length = DEFAULT_SETTINGS.default_length
    raw_length = env.get("PASSCRAFT_LENGTH")
    if raw_length:
        try:
            length = min(MAX_LENGTH, max(MIN_LENGTH, int(raw_length)))
        except ValueError:
            logger.warning(
                "invalid_setting", setting="PASSCRAFT_LENGTH", value=raw_length,
            )

    level = env.get("PASSCRAFT_LOG_LEVEL", "").strip().upper()
    if level not in _LEVELS:
        level = DEFAULT_SETTINGS.log_level

    log_json = env.get("PASSCRAFT_LOG_JSON", "").strip().lower() in _TRUTHY

    return Settings(default_length=length, log_level=level, log_json=log_json)
