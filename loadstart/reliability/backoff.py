"""
Fixed backoff schedules for bounded retries.

A schedule is an immutable, ordered sequence of waits. Its length is the
number of attempts: the wait at position N follows a failed attempt N,
and the loop stops at the first success without sleeping again.
"""

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterator, TypeVar

from loadstart.env import Env, TimeParser

T = TypeVar("T")


DEFAULT_BACKOFF_DELAYS: tuple[float, ...] = (1.0, 3.0, 5.0)


@dataclass(slots=True, frozen=True)
class BackoffSchedule:
    delays: tuple[float, ...] = DEFAULT_BACKOFF_DELAYS

    def __post_init__(self):
        if len(self.delays) < 1:
            raise ValueError("A backoff schedule needs at least one attempt")

        if any(delay < 0 for delay in self.delays):
            raise ValueError(f"Backoff delays must not be negative, got {self.delays}")

    @classmethod
    def from_env(cls, env: Env) -> "BackoffSchedule":
        return cls.parse(env.LOADSTART_PROBE_BACKOFF)

    @classmethod
    def parse(cls, schedule: str) -> "BackoffSchedule":
        return cls(
            delays=TimeParser().parse_many(schedule)
        )

    @property
    def attempts(self) -> int:
        return len(self.delays)

    @property
    def total_delay(self) -> float:
        return sum(self.delays)

    def __iter__(self) -> Iterator[tuple[int, float]]:
        return iter(enumerate(self.delays, start=1))


async def run_with_backoff(
    attempt: Callable[[int], Awaitable[T]],
    succeeded: Callable[[T], bool],
    schedule: BackoffSchedule,
) -> tuple[T, int]:
    """
    Run ``attempt`` until ``succeeded`` accepts its result or the schedule
    is exhausted. Returns the last result and the number of attempts made.

    Waits go through ``asyncio.sleep`` so task cancellation interrupts
    them immediately.
    """
    result: T | None = None
    attempts = 0

    for attempt_number, delay in schedule:
        attempts = attempt_number
        result = await attempt(attempt_number)

        if succeeded(result):
            break

        await asyncio.sleep(delay)

    return result, attempts
