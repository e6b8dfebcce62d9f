from .logging_config import LoggingConfig, LoggingSettings, LogOutput

__all__ = [
    "LoggingConfig",
    "LoggingSettings",
    "LogOutput",
]
