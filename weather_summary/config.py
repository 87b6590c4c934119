"""
Run configuration read from the environment (and a .env file).
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from weather_summary.schema import DayFormat

SOURCE_DIR_ENV = "WEATHER_SOURCE_DIR"
OUTPUT_DIR_ENV = "WEATHER_OUTPUT_DIR"
DAY_FORMAT_ENV = "WEATHER_DAY_FORMAT"
WRITE_OUTPUT_ENV = "WEATHER_WRITE_OUTPUT"
LOG_LEVEL_ENV = "LOG_LEVEL"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """
    Settings for one summarising run.

    Attributes:
        source_dir (Path): Directory holding the monthly CSV exports.
        output_dir (Path): Directory for the yearly highs/lows files.
        day_format (DayFormat): Day-boundary policy.
        write_output (bool): Whether to write the yearly files.
        log_level (str): Logging level name.
    """

    source_dir: Optional[Path]
    output_dir: Optional[Path]
    day_format: DayFormat
    write_output: bool
    log_level: str


def _read_str_env(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    candidate = value.strip()
    return candidate or None


def _read_path_env(name: str) -> Optional[Path]:
    value = _read_str_env(name)
    return Path(value) if value else None


def _read_bool_env(name: str, default: bool = False) -> bool:
    value = _read_str_env(name)
    if value is None:
        return default
    return value.lower() in _TRUE_VALUES


def load_settings(dotenv_path: str = ".env") -> Settings:
    """
    Build Settings from the environment, after loading the .env file.

    Raises:
        ValueError: If WEATHER_DAY_FORMAT names no known day format.
    """
    load_dotenv(verbose=True, dotenv_path=dotenv_path)

    day_format_name = _read_str_env(DAY_FORMAT_ENV)
    day_format = (
        DayFormat.from_name(day_format_name) if day_format_name else DayFormat.D24HOUR
    )

    return Settings(
        source_dir=_read_path_env(SOURCE_DIR_ENV),
        output_dir=_read_path_env(OUTPUT_DIR_ENV),
        day_format=day_format,
        write_output=_read_bool_env(WRITE_OUTPUT_ENV),
        log_level=(_read_str_env(LOG_LEVEL_ENV) or "INFO").upper(),
    )
