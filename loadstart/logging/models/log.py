from __future__ import annotations

import datetime
import os
from types import FrameType

import msgspec

from .entry import Entry


def _utc_now() -> str:
    return datetime.datetime.now(datetime.UTC).isoformat()


class Log(msgspec.Struct, kw_only=True):
    """An accepted entry along with the logger and call site it came from."""

    entry: Entry
    logger: str
    filename: str
    function_name: str
    line_number: int
    timestamp: str = msgspec.field(default_factory=_utc_now)

    @classmethod
    def from_frame(
        cls,
        entry: Entry,
        logger: str,
        frame: FrameType,
    ) -> Log:
        code = frame.f_code

        return cls(
            entry=entry,
            logger=logger,
            filename=code.co_filename,
            function_name=code.co_name,
            line_number=frame.f_lineno,
        )

    def to_line(self, template: str) -> str:
        return self.entry.to_template(
            template,
            context={
                "logger": self.logger,
                "filename": os.path.basename(self.filename),
                "function_name": self.function_name,
                "line_number": self.line_number,
                "timestamp": self.timestamp,
            },
        )
