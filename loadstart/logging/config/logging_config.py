import contextvars
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable

from loadstart.env import Env
from loadstart.logging.models import LogLevel, LogLevelName


class LogOutput(Enum):
    STDOUT = "stdout"
    STDERR = "stderr"


@dataclass(slots=True, frozen=True)
class LoggingSettings:
    """
    Attributes:
        level: Entries below this level are dropped.
        output: Console stream for loggers without a log file.
        directory: Base directory for relative log file paths.
        disabled: Names of loggers that drop every entry.
    """

    level: LogLevel = LogLevel.INFO
    output: LogOutput = LogOutput.STDERR
    directory: str | None = None
    disabled: frozenset[str] = frozenset()


_settings: contextvars.ContextVar[LoggingSettings] = contextvars.ContextVar(
    "loadstart_logging_settings",
    default=LoggingSettings(),
)


class LoggingConfig:
    """
    Logging settings shared by every logger stream.

    Settings are held in a context variable: tasks see the settings that
    were current when they were created, and updates made inside a task
    stay with that task and the tasks it spawns.
    """

    def update(
        self,
        log_directory: str | None = None,
        log_level: LogLevelName | str | None = None,
        log_output: str | None = None,
        disabled_loggers: Iterable[str] | None = None,
    ) -> None:
        changes = {}

        if log_directory:
            changes["directory"] = log_directory

        if log_level:
            changes["level"] = LogLevel.parse(log_level)

        if log_output:
            changes["output"] = LogOutput(log_output)

        if disabled_loggers is not None:
            changes["disabled"] = frozenset(disabled_loggers)

        _settings.set(
            replace(_settings.get(), **changes)
        )

    def reset(self) -> None:
        _settings.set(LoggingSettings())

    def update_from_env(self, env: Env) -> None:
        self.update(
            log_directory=env.LOADSTART_LOGS_DIRECTORY,
            log_level=env.LOADSTART_LOG_LEVEL,
            log_output=env.LOADSTART_LOG_OUTPUT,
        )

    def enabled(self, logger_name: str, level: LogLevel) -> bool:
        settings = _settings.get()

        return logger_name not in settings.disabled and settings.level.allows(level)

    @property
    def settings(self) -> LoggingSettings:
        return _settings.get()

    @property
    def level(self) -> LogLevel:
        return _settings.get().level

    @property
    def output(self) -> LogOutput:
        return _settings.get().output

    @property
    def directory(self) -> str | None:
        return _settings.get().directory
