"""
Storage-level exceptions raised by cluster client implementations.
"""


class ClusterError(Exception):
    """Base exception for cluster client operations."""
    pass


class StatusConflictError(ClusterError):
    """
    Raised when a status write carries a stale resource version.

    The write is rejected as a whole, mirroring optimistic concurrency
    on the status sub-resource.
    """

    def __init__(self, name: str, expected_version: int, actual_version: int):
        super().__init__(
            f"Conflict updating status of {name}: resource version {expected_version} is stale (current {actual_version})"
        )
        self.name = name
        self.expected_version = expected_version
        self.actual_version = actual_version


class ResourceNotFoundError(ClusterError):
    """Raised when a resource addressed by name does not exist."""

    def __init__(self, kind: str, name: str, namespace: str):
        super().__init__(f"{kind} {namespace}/{name} not found")
        self.kind = kind
        self.name = name
        self.namespace = namespace


class StarterExistsError(ClusterError):
    """Raised when creating a job whose name is already taken."""

    def __init__(self, name: str, namespace: str):
        super().__init__(f"Job {namespace}/{name} already exists")
        self.name = name
        self.namespace = namespace


class OwnerReferenceError(ClusterError):
    """
    Raised when a controller reference cannot be bound to an object.

    Either the owner lives in another namespace or the object is already
    controlled by a different owner.
    """
    pass
