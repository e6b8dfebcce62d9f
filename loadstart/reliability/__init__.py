from .backoff import (
    DEFAULT_BACKOFF_DELAYS,
    BackoffSchedule,
    run_with_backoff,
)

__all__ = [
    "DEFAULT_BACKOFF_DELAYS",
    "BackoffSchedule",
    "run_with_backoff",
]
