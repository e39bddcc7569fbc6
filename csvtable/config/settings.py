"""
Configuration settings for csvtable.

**Conceptual**: This module provides a strongly-typed configuration object
that loads from environment variables (via .env files). Settings are
validated at construction, so a bad value fails fast with a clear message
instead of surfacing later as a confusing read error.

**Environment variables** (all optional):
  - CSVTABLE_DATA_DIR: Directory scanned by action scripts (default "data").
  - CSVTABLE_ENCODING: Text encoding for reading/writing files (default "utf-8").
  - CSVTABLE_FILE_SUFFIX: Suffix of table files (default ".csv").
  - CSVTABLE_LOG_LEVEL: Logging level name (default "WARNING").

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import codecs
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CsvTableSettings:
    """
    Settings for reading and writing table files.

    Attributes:
        data_dir: Default directory for table files.
        encoding: Text encoding used by read_table/write_table.
        file_suffix: Suffix identifying table files (must start with ".").
        log_level: Name of the logging level used by configure_logging.
    """
    data_dir: Path = Path("data")
    encoding: str = "utf-8"
    file_suffix: str = ".csv"
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate settings after initialization."""
        if not self.encoding:
            raise ValueError("CSVTABLE_ENCODING must not be empty.")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"CSVTABLE_ENCODING is not a known encoding, got: {self.encoding}")
        if not self.file_suffix.startswith("."):
            raise ValueError(
                f"CSVTABLE_FILE_SUFFIX must start with '.', got: {self.file_suffix}"
            )
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"CSVTABLE_LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got: {self.log_level}"
            )

    @property
    def log_level_value(self) -> int:
        """The log level as a logging module constant."""
        return getattr(logging, self.log_level.upper())

    @classmethod
    def from_env(cls) -> "CsvTableSettings":
        """
        Load settings from environment variables.

        Returns:
            CsvTableSettings with values from the environment, defaults elsewhere.

        Raises:
            ValueError: If any variable holds an invalid value.

        Usage example:
            >>> # In .env file:
            >>> # CSVTABLE_DATA_DIR=tables
            >>> settings = CsvTableSettings.from_env()
            >>> print(settings.data_dir)  # "tables"
        """
        return cls(
            data_dir=Path(os.getenv("CSVTABLE_DATA_DIR", "data")),
            encoding=os.getenv("CSVTABLE_ENCODING", "utf-8"),
            file_suffix=os.getenv("CSVTABLE_FILE_SUFFIX", ".csv"),
            log_level=os.getenv("CSVTABLE_LOG_LEVEL", "WARNING"),
        )


# Global settings singleton (lazy-loaded)
_default_settings: Optional[CsvTableSettings] = None


def get_settings() -> CsvTableSettings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached.
    Tests can call reset_settings() after changing environment variables.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = CsvTableSettings.from_env()

    return _default_settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    global _default_settings
    _default_settings = None
