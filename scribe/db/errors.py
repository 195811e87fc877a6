"""Store error hierarchy.

Audit stores raise these so callers see one failure type per cause,
whichever backend is configured.
"""


class StoreError(Exception):
    """Base exception for all audit store failures.

    Backend-specific exceptions are kept on ``cause``.
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConnectionError(StoreError):
    """The backend could not be reached or the query failed in transit.

    Examples:
        - Pool creation timed out
        - Server closed the connection mid-write
    """


class ConflictError(StoreError):
    """An append collided with an existing entry (duplicate entry id)."""


class ValidationError(StoreError):
    """Stored data could not be mapped back to an audit entry."""
