"""System-level configuration classes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from csvviz.core.utils.logger import DEFAULT_LOG_LEVEL

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    """Configuration for the csvviz logger."""

    level: str = DEFAULT_LOG_LEVEL
    file: Optional[str] = None
    format: Optional[str] = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        from csvviz.core.utils.logger import log_warning

        level = str(self.level).strip().upper()
        if level not in _LOG_LEVELS:
            log_warning(
                "CONFIG", f"Invalid logging.level '{self.level}', using 'INFO'"
            )
            level = DEFAULT_LOG_LEVEL
        self.level = level
        if self.file is not None and not str(self.file).strip():
            self.file = None
