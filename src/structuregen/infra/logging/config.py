from __future__ import annotations

"""
Logging settings for the structure generator.

The CLI always logs to stderr; '--log-file' adds a size-capped rotating
file next to it.
"""

import logging
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings consumed by configure_logging().

    Attributes:
        level: Level name ('DEBUG', 'INFO', ...); unknown names mean INFO.
        console: Emit records on stderr.
        log_file: Path of the rotating log, None to disable it.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept beside the active one.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    @property
    def level_number(self) -> int:
        value = logging.getLevelName(str(self.level or "").strip().upper())
        return value if isinstance(value, int) else logging.INFO
