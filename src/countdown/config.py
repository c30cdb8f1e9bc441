"""Configuration management for Countdown."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.ordering import SORT_ORDER_TOKENS

logger = logging.getLogger(__name__)

COUNTDOWN_HOME = Path(os.environ.get("COUNTDOWN_HOME", Path.home() / ".countdown"))
CONFIG_FILE = COUNTDOWN_HOME / "countdown.conf"
EVENTS_FILE = COUNTDOWN_HOME / "events.json"


@dataclass
class Config:
    """Countdown configuration."""

    events_file: str = str(EVENTS_FILE)
    default_order: str = "time-asc"
    default_limit: int | None = None

    def events_path(self) -> Path:
        return Path(self.events_file).expanduser()


def _strip_value(value: str) -> str:
    """Unquote a value, or drop an inline comment from an unquoted one."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from countdown.conf file."""
    path = path or CONFIG_FILE
    config = Config()

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _strip_value(value.strip())

        match key:
            case "events_file":
                if value:
                    config.events_file = value
            case "default_order":
                if value in SORT_ORDER_TOKENS:
                    config.default_order = value
                else:
                    logger.warning(f"Ignoring unknown DEFAULT_ORDER: {value!r}")
            case "default_limit":
                if not value:
                    config.default_limit = None
                    continue
                try:
                    limit = int(value)
                except ValueError:
                    logger.warning(f"Ignoring non-numeric DEFAULT_LIMIT: {value!r}")
                    continue
                if limit < 0:
                    logger.warning(f"Ignoring negative DEFAULT_LIMIT: {limit}")
                    continue
                config.default_limit = limit

    return config
