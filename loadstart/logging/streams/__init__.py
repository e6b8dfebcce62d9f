from .logger import Logger
from .logger_context import LoggerContext
from .logger_stream import LoggerStream

__all__ = [
    "Logger",
    "LoggerContext",
    "LoggerStream",
]
