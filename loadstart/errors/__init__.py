from .cluster import (
    ClusterError,
    OwnerReferenceError,
    ResourceNotFoundError,
    StarterExistsError,
    StatusConflictError,
)
from .launch import (
    LaunchError,
    LaunchTimeoutError,
    ListingError,
    StarterCreateError,
    StatusUpdateError,
)

__all__ = [
    "ClusterError",
    "LaunchError",
    "LaunchTimeoutError",
    "ListingError",
    "OwnerReferenceError",
    "ResourceNotFoundError",
    "StarterCreateError",
    "StarterExistsError",
    "StatusConflictError",
    "StatusUpdateError",
]
