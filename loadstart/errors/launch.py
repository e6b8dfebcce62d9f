"""
Launch coordination exceptions.

Only hard failures are exceptions. Conditions that simply mean "not yet"
(runner pods still starting, a runner service not answering its status
endpoint) are reported through the returned result and the logs, and the
next reconciliation pass tries again.
"""


class LaunchError(Exception):
    """Base exception for launch coordination."""

    def __init__(self, message: str, job: str | None = None, namespace: str | None = None):
        super().__init__(message)
        self.job = job
        self.namespace = namespace


class ListingError(LaunchError):
    """
    Raised when runner pods or runner services could not be listed.

    Listing is never retried in-pass; the owning reconciler re-invokes
    the phase.
    """

    def __init__(
        self,
        message: str,
        kind: str,
        job: str | None = None,
        namespace: str | None = None,
    ):
        super().__init__(message, job=job, namespace=namespace)
        self.kind = kind


class StatusUpdateError(LaunchError):
    """
    Raised when the job's stage could not be persisted.

    No starter job is created when this is raised and the job stays in
    its pre-start stage.
    """
    pass


class StarterCreateError(LaunchError):
    """
    Raised when the starter job could not be created after the job was
    already marked started.
    """
    pass


class LaunchTimeoutError(LaunchError):
    """Raised when a launch pass exceeds its configured timeout."""
    pass
