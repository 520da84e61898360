"""Configuration management for gtd."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

GTD_HOME = Path(os.environ.get("GTD_HOME", Path.home() / "gtd"))
CONFIG_FILE = GTD_HOME / "config" / "gtd.conf"
DATA_DIR = GTD_HOME / "data"

SOURCES = ("file", "api")


@dataclass
class Config:
    """gtd configuration."""

    api_url: str = "http://localhost:3001/api"
    api_token: str = ""
    tasks_file: str = ""
    source: str = "file"
    show_completed: bool = False
    request_timeout: int = 10

    @property
    def tasks_path(self) -> Path:
        """Resolved path of the local task export."""
        if self.tasks_file:
            return Path(self.tasks_file).expanduser()
        return DATA_DIR / "tasks.json"


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from gtd.conf, then apply environment overrides."""
    config = Config()
    config_file = config_file or CONFIG_FILE

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
                case "api_url":
                    config.api_url = value.rstrip("/")
                case "api_token":
                    config.api_token = value
                case "tasks_file":
                    config.tasks_file = value
                case "source":
                    if value.lower() in SOURCES:
                        config.source = value.lower()
                    else:
                        logger.warning(f"Unknown SOURCE {value!r}, using {config.source!r}")
                case "show_completed":
                    config.show_completed = _parse_bool(value)
                case "request_timeout":
                    try:
                        config.request_timeout = int(value)
                    except ValueError:
                        logger.warning(f"Invalid REQUEST_TIMEOUT {value!r}, using {config.request_timeout}")

    token = os.environ.get("GTD_API_TOKEN")
    if token:
        config.api_token = token

    return config
