"""Infrastructure exceptions for storage operations.

Storage errors extend TodoException so they share error_code/details, but
the service layer maps them to generic ServiceException subclasses before
they reach a client.
"""

from todo_api.domain.exceptions import TodoException


class StorageException(TodoException):
    """A statement failed after startup. Not retried; cause is chained."""

    def __init__(self, reason: str, operation: str | None = None) -> None:
        details = {"reason": reason}
        if operation:
            details["operation"] = operation
        super().__init__("Storage operation failed", "STORAGE_ERROR", details)


class ConnectivityException(TodoException):
    """Storage unreachable at startup after all connection attempts. Fatal."""

    def __init__(self, attempts: int, reason: str | None = None) -> None:
        super().__init__(
            f"Could not connect to database after {attempts} attempts",
            "CONNECTIVITY_ERROR",
            {"attempts": attempts, "reason": reason},
        )
