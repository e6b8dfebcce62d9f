from __future__ import annotations

from enum import Enum
from typing import Literal

LogLevelName = Literal["debug", "info", "warn", "error"]


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @property
    def rank(self) -> int:
        return _LEVEL_RANKS[self]

    def allows(self, level: LogLevel) -> bool:
        """Whether an entry at ``level`` passes a threshold of this level."""
        return level.rank >= self.rank

    @classmethod
    def parse(cls, level_name: str) -> LogLevel:
        name = level_name.strip().upper()
        if name == "WARNING":
            name = "WARN"

        try:
            return cls(name)

        except ValueError:
            return cls.INFO


_LEVEL_RANKS = {
    level: rank for rank, level in enumerate(LogLevel)
}
