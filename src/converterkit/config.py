"""
Configuration for a single converter invocation.

Built once at the entry point and passed by parameter to the resolver and
the transform; nothing below the CLI reads process-wide argument state.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_ARCHIVE_EXTENSION = ".txt"
DEFAULT_UTC_OFFSET_HOURS = 8.0
DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ConverterConfig:
    input_path: str
    output_path: Optional[str] = None
    archive_extension: str = DEFAULT_ARCHIVE_EXTENSION
    utc_offset_hours: float = DEFAULT_UTC_OFFSET_HOURS
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        ext = self.archive_extension
        if not ext.startswith(".") or len(ext) < 2:
            raise ValueError(f"Archive extension must look like '.txt', got '{ext}'")
        # Mode selection compares lowercased suffixes.
        object.__setattr__(self, "archive_extension", ext.lower())
        if not -24 < self.utc_offset_hours < 24:
            raise ValueError(f"UTC offset must be within (-24, 24) hours, got {self.utc_offset_hours}")
        level = self.log_level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.log_level}'")
        object.__setattr__(self, "log_level", level)

    @classmethod
    def from_env(cls, input_path: str, output_path: Optional[str] = None) -> "ConverterConfig":
        """
        Build a config from CLI values plus ``CONVERTER_*`` environment variables.

        A ``.env`` file in the working directory is honoured.
        """
        load_dotenv()
        offset = os.getenv("CONVERTER_UTC_OFFSET")
        try:
            utc_offset_hours = float(offset) if offset else DEFAULT_UTC_OFFSET_HOURS
        except ValueError:
            raise ValueError(f"CONVERTER_UTC_OFFSET must be a number, got '{offset}'") from None
        return cls(
            input_path=input_path,
            output_path=output_path,
            archive_extension=os.getenv("CONVERTER_ARCHIVE_EXT") or DEFAULT_ARCHIVE_EXTENSION,
            utc_offset_hours=utc_offset_hours,
            log_level=os.getenv("CONVERTER_LOG_LEVEL") or DEFAULT_LOG_LEVEL,
        )
