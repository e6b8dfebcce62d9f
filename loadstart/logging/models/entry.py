from typing import Any

import msgspec

from .log_level import LogLevel


class Entry(msgspec.Struct, kw_only=True):
    """
    Base of every structured log entry.

    Subclasses add the fields a line is rendered from and pin their
    level, so call sites only pass the message and context.
    """

    message: str
    level: LogLevel = LogLevel.INFO

    def to_context(self) -> dict[str, Any]:
        context = msgspec.structs.asdict(self)
        context["level"] = self.level.value

        return context

    def to_template(
        self,
        template: str,
        context: dict[str, Any] | None = None,
    ) -> str:
        values = self.to_context()

        if context:
            values.update(context)

        return template.format(**values)
