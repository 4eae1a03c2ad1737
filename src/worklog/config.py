"""Configuration management for the work journal."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.weeks import parse_week_start_day

logger = logging.getLogger(__name__)

WORKLOG_HOME = Path(os.environ.get("WORKLOG_HOME", Path.home() / "worklog"))
CONFIG_FILE = WORKLOG_HOME / "config" / "worklog.conf"
DATA_DIR = WORKLOG_HOME / "data"
DEFAULT_WEEK_START_DAY = "Monday"


def default_database_url() -> str:
    return f"sqlite:///{DATA_DIR / 'worklog.db'}"


@dataclass
class Config:
    """Work journal configuration."""

    database_url: str = ""
    week_start_day: str = DEFAULT_WEEK_START_DAY
    host: str = "127.0.0.1"
    port: int = 5000
    log_level: str = "INFO"

    def __post_init__(self):
        if not self.database_url:
            self.database_url = default_database_url()
        self.week_start_day = _checked_week_start_day(self.week_start_day)

    @property
    def week_start_weekday(self) -> int:
        """The week start as a date.weekday() number."""
        return parse_week_start_day(self.week_start_day)


def _checked_week_start_day(value: str) -> str:
    try:
        parse_week_start_day(value)
    except ValueError:
        logger.warning(f"Invalid WEEK_START_DAY value {value!r}, using {DEFAULT_WEEK_START_DAY}")
        return DEFAULT_WEEK_START_DAY
    return value


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from worklog.conf, then apply environment overrides."""
    config = Config()
    config_file = path or CONFIG_FILE

    if config_file.exists():
        for line in config_file.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = _unquote(value.strip())

            match key:
                case "database_url":
                    config.database_url = value
                case "week_start_day":
                    config.week_start_day = _checked_week_start_day(value)
                case "host":
                    config.host = value
                case "port":
                    try:
                        config.port = int(value)
                    except ValueError:
                        logger.warning(f"Invalid PORT value {value!r}, using {config.port}")
                case "log_level":
                    config.log_level = value.upper()

    env_url = os.environ.get("WORKLOG_DATABASE_URL")
    if env_url:
        config.database_url = env_url

    return config
