from .logger_context import LoggerContext


class Logger:
    """
    Registry of named logger streams.

    Example usage:
        logger = Logger(path="launch.log.json")

        async with logger.context(name="launch_coordinator", nested=True) as ctx:
            await ctx.log(LaunchInfo(...))

    A ``path`` given here sends every context without its own path to
    that log file. ``buffer_size`` keeps the most recent accepted entries
    of each context in memory, readable through ``records()``.
    """

    def __init__(
        self,
        buffer_size: int = 0,
        path: str | None = None,
    ) -> None:
        self._contexts: dict[str, LoggerContext] = {}
        self._buffer_size = buffer_size
        self._path = path

    @property
    def path(self) -> str | None:
        return self._path

    def records(self, name: str = "default") -> list:
        context = self._contexts.get(name)
        if context is None:
            return []

        return context.stream.records

    def context(
        self,
        name: str | None = None,
        template: str | None = None,
        path: str | None = None,
        nested: bool = False,
    ) -> LoggerContext:
        if name is None:
            name = "default"

        if path is None:
            path = self._path

        context = self._contexts.get(name)
        if context is None:
            context = LoggerContext(
                name=name,
                template=template,
                path=path,
                nested=nested,
                buffer_size=self._buffer_size,
            )
            self._contexts[name] = context

        else:
            context.nested = nested
            context.stream.configure(
                template=template,
                path=path,
            )

        return context

    async def close(self) -> None:
        for context in self._contexts.values():
            await context.stream.close()
