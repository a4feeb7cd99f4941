"""Configuration management for tasksched."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

TASKSCHED_HOME = Path(os.environ.get("TASKSCHED_HOME", Path.home() / ".tasksched"))
CONFIG_FILE = TASKSCHED_HOME / "tasksched.conf"


@dataclass
class Config:
    """tasksched configuration."""

    task_file: str = ""
    date_format: str = "%A %d %B %Y"
    show_date: bool = True
    max_sleep_step: float = 60.0


def _parse_bool(value: str) -> bool | None:
    lowered = value.lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    return None


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from unquoted values."""
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        return value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from tasksched.conf, then apply environment overrides."""
    config = Config()
    path = path or CONFIG_FILE

    if path.exists():
        for line in path.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = _unquote(value.strip())

            match key:
                case "task_file":
                    config.task_file = value
                case "date_format":
                    config.date_format = value
                case "show_date":
                    flag = _parse_bool(value)
                    if flag is None:
                        logger.warning(f"Invalid SHOW_DATE value: {value!r}")
                    else:
                        config.show_date = flag
                case "max_sleep_step":
                    try:
                        step = float(value)
                    except ValueError:
                        step = 0.0
                    if step > 0:
                        config.max_sleep_step = step
                    else:
                        logger.warning(f"Invalid MAX_SLEEP_STEP value: {value!r}")

    env_task_file = os.environ.get("TASKSCHED_TASK_FILE")
    if env_task_file:
        config.task_file = env_task_file

    return config
