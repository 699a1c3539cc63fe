"""Domain exceptions for the todo service.

Defines the error taxonomy shared by the service layer and the HTTP
exception handlers. Presentation layer maps error_code to a status code
and renders to_dict(); messages are safe to show to clients.
"""

from typing import Any


class TodoException(Exception):
    """Base exception for all todo service errors.

    Attributes:
        message: Client-facing error description.
        error_code: Machine-readable error code.
        details: Additional context for logs (never rendered to clients).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Client-facing error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body: {"error": message}."""
        return {"error": self.message}


class ValidationException(TodoException):
    """Raised when input is missing or malformed; rejected before any storage call."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ServiceException(TodoException):
    """Raised when a task operation fails because storage failed.

    The message is generic; the underlying cause is logged server-side.
    """


class FetchFailedException(ServiceException):
    """Listing tasks failed."""

    def __init__(self) -> None:
        super().__init__("Failed to fetch todos", "FETCH_FAILED")


class CreateFailedException(ServiceException):
    """Creating a task failed at the insert or the re-read step."""

    def __init__(self) -> None:
        super().__init__("Failed to add todo", "CREATE_FAILED")


class DeleteFailedException(ServiceException):
    """Deleting a task failed."""

    def __init__(self, task_id: int) -> None:
        super().__init__("Failed to delete todo", "DELETE_FAILED", {"task_id": task_id})
