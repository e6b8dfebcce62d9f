from .starter import (
    UNPAUSE_PAYLOAD,
    StarterConfig,
    new_starter_job,
    starter_name,
    unpause_command,
)

__all__ = [
    "UNPAUSE_PAYLOAD",
    "StarterConfig",
    "new_starter_job",
    "starter_name",
    "unpause_command",
]
