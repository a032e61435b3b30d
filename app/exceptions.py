from typing import Any, Mapping, Optional


class AppError(Exception):
    """Base class for errors that map onto an HTTP status.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: machine-readable error code, defaults to the class ``default_code``
        http_status: HTTP status code used by the exception handlers
    """

    http_status = 500
    default_code = "APP_ERROR"
    default_message = "Application error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(AppError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_code = "SERVICE_VALIDATION_ERROR"
    default_message = "Invalid input"


class ConflictError(ServiceValidationError):
    """Raised when a resource conflict occurs (e.g., duplicate email).

    Clients of the API expect a plain 400 here, so the status is inherited
    from ServiceValidationError rather than using 409.
    """

    default_code = "CONFLICT"
    default_message = "Conflict"


class NotFoundError(AppError):
    """Raised when a requested resource was not found. http_status is 404."""

    http_status = 404
    default_code = "NOT_FOUND"
    default_message = "Not found"


class UnauthorizedError(AppError):
    """Raised when a request carries no session. http_status is 401."""

    http_status = 401
    default_code = "UNAUTHORIZED"
    default_message = "Unauthorized"
