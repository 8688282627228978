"""
Error categories for the Yoga Master backend.

A category is a class with two attributes: the HTTP ``status_code`` it renders
as and the default machine-readable ``code``. Modules raise subclasses with a
more specific code and structured details; api/errors.py renders any of them
from these attributes alone.
"""

from typing import Any, ClassVar, Optional


class YogaMasterError(Exception):
    """Root of every domain error. Uncategorized errors are 500s."""

    status_code: ClassVar[int] = 500
    default_code: ClassVar[str] = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = dict(details) if details else {}

    def to_dict(self) -> dict[str, Any]:
        """Body of the error response: code, message and details."""
        return {"error": self.code, "message": self.message, "details": self.details}


class NotFoundError(YogaMasterError):
    status_code = 404
    default_code = "NOT_FOUND"


class ValidationError(YogaMasterError):
    status_code = 422
    default_code = "VALIDATION_FAILED"


class ConflictError(YogaMasterError):
    """The write collides with stored state, e.g. a replayed or duplicate record."""

    status_code = 409
    default_code = "CONFLICT"


class AuthenticationError(YogaMasterError):
    """Invalid or missing credentials. Clients should log in again."""

    status_code = 401
    default_code = "UNAUTHENTICATED"


class AuthorizationError(YogaMasterError):
    """Valid credentials, but the caller may not do this."""

    status_code = 403
    default_code = "FORBIDDEN"


class ExternalServiceError(YogaMasterError):
    """
    A collaborator (store, payment gateway) failed the request.

    ``service`` names the collaborator and is echoed in the details.
    """

    status_code = 502
    default_code = "EXTERNAL_SERVICE_FAILED"

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, {**(details or {}), "service": service})
        self.service = service


class StorageTimeoutError(ExternalServiceError):
    """
    A collaborator did not answer within the configured timeout.

    The call may still complete after this is raised.
    """

    status_code = 504
    default_code = "STORAGE_TIMEOUT"

    def __init__(self, service: str, timeout: Optional[float]):
        super().__init__(
            f"{service} did not respond within {timeout}s",
            service=service,
            details={"timeout": timeout},
        )
        self.timeout = timeout
