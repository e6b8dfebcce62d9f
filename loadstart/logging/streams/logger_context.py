from .logger_stream import LoggerStream


class LoggerContext:
    """
    Async context around a named stream. Leaving a context closes the
    stream's log file unless the context is nested in a longer-lived
    owner, which closes it through ``Logger.close()``.
    """

    def __init__(
        self,
        name: str = "default",
        template: str | None = None,
        path: str | None = None,
        nested: bool = False,
        buffer_size: int = 0,
    ) -> None:
        self.name = name
        self.nested = nested
        self.stream = LoggerStream(
            name=name,
            template=template,
            path=path,
            buffer_size=buffer_size,
        )

    async def __aenter__(self) -> LoggerStream:
        await self.stream.initialize()
        return self.stream

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.nested is False:
            await self.stream.close()
