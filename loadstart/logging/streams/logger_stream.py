import asyncio
import io
import os
import pathlib
import sys
from collections import deque
from typing import Deque

import msgspec

from loadstart.logging.config.logging_config import LoggingConfig, LogOutput
from loadstart.logging.models import Entry, Log


_LOGGING_DIRECTORY = os.path.dirname(
    os.path.dirname(os.path.abspath(__file__))
)

DEFAULT_TEMPLATE = "{timestamp} - {level} - {logger} - {filename}:{function_name}.{line_number} - {message}"


def _find_caller():
    """
    Find the first stack frame outside the logging package so that we
    can note the source file name, line number and function name.
    """
    frame = sys._getframe(1)
    while frame.f_back is not None and frame.f_code.co_filename.startswith(_LOGGING_DIRECTORY):
        frame = frame.f_back

    return frame


class LoggerStream:
    """
    Writes the entries of one named logger.

    Without a log file, entries are rendered through the template and
    written to the configured console stream. With one, each entry is
    appended as a msgspec JSON line. Relative log file paths resolve
    against the configured logs directory, or the working directory when
    none is set.
    """

    def __init__(
        self,
        name: str = "default",
        template: str | None = None,
        path: str | None = None,
        buffer_size: int = 0,
    ) -> None:
        self._name = name
        self._template = template or DEFAULT_TEMPLATE
        self._path = path

        self._config = LoggingConfig()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._lock = asyncio.Lock()
        self._logfile: io.TextIOWrapper | None = None
        self._logfile_path: str | None = None

        self._records: Deque[Entry] | None = (
            deque(maxlen=buffer_size) if buffer_size > 0 else None
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> str | None:
        return self._path

    @property
    def logfile_path(self) -> str | None:
        return self._logfile_path

    @property
    def records(self) -> list[Entry]:
        if self._records is None:
            return []

        return list(self._records)

    def configure(
        self,
        template: str | None = None,
        path: str | None = None,
    ) -> None:
        if template:
            self._template = template

        if path:
            self._path = path

    async def initialize(self) -> None:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()

    async def log(self, entry: Entry | Log) -> None:
        if isinstance(entry, Entry):
            entry = Log.from_frame(entry, self._name, _find_caller())

        if self._config.enabled(self._name, entry.entry.level) is False:
            return

        await self.initialize()

        if self._records is not None:
            self._records.append(entry.entry)

        if self._path:
            await self._write_to_file(entry)

        else:
            await self._write_to_stream(entry)

    async def _write_to_stream(self, log: Log) -> None:
        stream = sys.stdout if self._config.output == LogOutput.STDOUT else sys.stderr

        try:
            line = log.to_line(self._template)

        except (KeyError, IndexError, ValueError) as err:
            line = f"{log.timestamp} - {log.entry.level.value} - {log.logger} - {log.entry.message} ({err})"

        await self._loop.run_in_executor(
            None,
            self._write_line,
            stream,
            line,
        )

    def _write_line(
        self,
        stream: io.TextIOBase,
        line: str,
    ) -> None:
        stream.write(f"{line}\n")
        stream.flush()

    async def _write_to_file(self, log: Log) -> None:
        directory = self._config.directory
        line = msgspec.json.encode(log).decode()

        async with self._lock:
            await self._loop.run_in_executor(
                None,
                self._append_line,
                self._path,
                directory,
                line,
            )

    def _append_line(
        self,
        path: str,
        directory: str | None,
        line: str,
    ) -> None:
        logfile_path = pathlib.Path(path)
        if not logfile_path.is_absolute():
            logfile_path = pathlib.Path(directory or os.getcwd()) / logfile_path

        resolved = str(logfile_path.resolve())

        if self._logfile is None or self._logfile.closed or self._logfile_path != resolved:
            self._close_logfile()

            logfile_path.parent.mkdir(parents=True, exist_ok=True)
            self._logfile = open(resolved, "a")
            self._logfile_path = resolved

        self._logfile.write(f"{line}\n")
        self._logfile.flush()

    def _close_logfile(self) -> None:
        if self._logfile is not None and self._logfile.closed is False:
            self._logfile.close()

        self._logfile = None

    async def close(self) -> None:
        if self._logfile is None:
            return

        async with self._lock:
            if self._loop is None:
                self._close_logfile()

            else:
                await self._loop.run_in_executor(
                    None,
                    self._close_logfile,
                )
