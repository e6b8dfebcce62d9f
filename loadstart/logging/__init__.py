from .config import LoggingConfig, LoggingSettings, LogOutput
from .models import Entry, Log, LogLevel, LogLevelName
from .streams import Logger, LoggerContext, LoggerStream

__all__ = [
    "Entry",
    "Log",
    "LogLevel",
    "LogLevelName",
    "Logger",
    "LoggerContext",
    "LoggerStream",
    "LoggingConfig",
    "LoggingSettings",
    "LogOutput",
]
