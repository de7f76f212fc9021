"""Error taxonomy shared by the member, tenant and relation services.

Every class renders as ``{"error": <category>, "message": <detail>}`` and
carries the HTTP status it maps to.
"""
from __future__ import annotations
from typing import Optional

GENERIC_REMOTE_MESSAGE = "An error occurred processing your request"
GENERIC_UNEXPECTED_MESSAGE = "An unexpected error occurred"


class ServiceError(Exception):
    """Base error with HTTP status, short category and detail message."""

    status = 500
    default_error = "Internal error"

    def __init__(self, message: str, error: Optional[str] = None):
        self.message = message
        self.error = error or self.default_error
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error": self.error, "message": self.message}


class ValidationError(ServiceError):
    """Malformed or missing input, detected before any remote call."""

    status = 400
    default_error = "Invalid request"


class NotFoundError(ServiceError):
    """Entity absent, or present but outside the requested scope."""

    status = 404
    default_error = "Not found"


class MemberNotFoundError(NotFoundError):
    """Member does not exist or is not associated with the tenant."""

    def __init__(self, tenant_id: str, login_id: str):
        self.tenant_id = tenant_id
        self.login_id = login_id
        super().__init__(f"Member {login_id} not found in tenant {tenant_id}", error="Member not found")


class ResourceNotFoundError(NotFoundError):
    """Generic not-found for tenants, users and similar resources."""

    def __init__(self, resource_type: str, resource_id: str):
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(f"{resource_type} not found: {resource_id}", error=f"{resource_type} not found")


class RemoteServiceError(ServiceError):
    """The upstream platform rejected or failed the call.

    The message is fixed; upstream detail is only logged server-side.
    """

    status = 500
    default_error = "Service error"

    def __init__(self, error: Optional[str] = None):
        super().__init__(GENERIC_REMOTE_MESSAGE, error=error)
