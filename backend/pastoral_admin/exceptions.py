"""
Pastoral Admin Backend — Domain Error Hierarchy
=================================================

What:  Defines the error kinds services hand back to the HTTP layer.
How:   Each exception carries a user-safe message and an optional context
       dict. Global exception handlers (registered in main.py) turn them into
       JSON error responses with the matching HTTP status code.
Who:   Raised by services, the admin guard and middleware; caught by the
       global handlers.

Exception Hierarchy:
    PastoralAdminError (base)
    ├── NotFoundError                     → 404 Not Found
    │   ├── AddressNotFoundError
    │   ├── ChurchNotFoundError
    │   ├── IndustryNotFoundError
    │   └── FieldOfWorkNotFoundError
    ├── AlreadyExistsError                → 409 Conflict
    │   ├── ChurchAlreadyExistsError
    │   ├── IndustryAlreadyExistsError
    │   ├── FieldOfWorkAlreadyExistsError
    │   └── AddressInUseError
    ├── UnauthorizedError                 → 401 Unauthorized
    ├── InternalError                     → 500 Internal Server Error
    └── RateLimitExceededError            → 429 Too Many Requests

Repositories raise the entity's NotFoundError when a lookup returns no
rows. Services let NotFoundError and AlreadyExistsError through untouched
and wrap everything else in InternalError after logging the cause.
"""

from typing import Any, Dict, Optional


class PastoralAdminError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned for 5xx errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


# ══════════════════════════════════════════════════════════════════════════
# Not Found
# ══════════════════════════════════════════════════════════════════════════


class NotFoundError(PastoralAdminError):
    """
    Raised when a requested record does not exist.

    HTTP:    404 Not Found

    Subclasses fix the resource name so callers can catch the exact entity,
    e.g. a church lookup that returns nothing on the create path means the
    name is free, while the same condition on the update path is a 404.
    """

    resource = "resource"

    def __init__(
        self,
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {self.resource} was not found"
        if resource_id is not None:
            message = f"{self.resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = self.resource
        if resource_id is not None:
            ctx["resource_id"] = str(resource_id)
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class AddressNotFoundError(NotFoundError):
    resource = "address"


class ChurchNotFoundError(NotFoundError):
    resource = "church"


class IndustryNotFoundError(NotFoundError):
    resource = "industry"


class FieldOfWorkNotFoundError(NotFoundError):
    resource = "field of work"


# ══════════════════════════════════════════════════════════════════════════
# Conflicts
# ══════════════════════════════════════════════════════════════════════════


class AlreadyExistsError(PastoralAdminError):
    """
    Raised when a write would duplicate a unique business key.

    HTTP:    409 Conflict

    Example response:
        {
            "error": "already_exists",
            "message": "A church named 'St. Mary's Cathedral' already exists",
            "details": {"resource": "church", "name": "St. Mary's Cathedral"}
        }
    """

    resource = "resource"
    field = "key"

    def __init__(
        self,
        value: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"This {self.resource} already exists"
        if value is not None:
            message = f"A {self.resource} with {self.field} '{value}' already exists"
        ctx = context or {}
        ctx["resource"] = self.resource
        if value is not None:
            ctx[self.field] = value
        super().__init__(message=message, context=ctx)
        self.value = value


class ChurchAlreadyExistsError(AlreadyExistsError):
    resource = "church"
    field = "name"


class IndustryAlreadyExistsError(AlreadyExistsError):
    resource = "industry"


class FieldOfWorkAlreadyExistsError(AlreadyExistsError):
    resource = "field of work"


class AddressInUseError(AlreadyExistsError):
    """
    Raised when deleting an address that a church still references.

    The church.address_id foreign key is declared ON DELETE RESTRICT, so the
    database refuses the delete; the service reports it as a conflict.
    """

    resource = "address"

    def __init__(
        self,
        address_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = self.resource
        if address_id is not None:
            ctx["resource_id"] = str(address_id)
        PastoralAdminError.__init__(
            self,
            message="The address is still referenced by a church and cannot be deleted",
            context=ctx,
        )
        self.value = address_id


# ══════════════════════════════════════════════════════════════════════════
# Access, Internal, Throttling
# ══════════════════════════════════════════════════════════════════════════


class UnauthorizedError(PastoralAdminError):
    """
    Raised when an admin route is called without valid credentials.

    HTTP:    401 Unauthorized
    """

    def __init__(
        self,
        message: str = "Missing or invalid admin credentials",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InternalError(PastoralAdminError):
    """
    Single opaque kind for any unexpected persistence or transaction failure.

    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. The cause
        (SQL error, constraint name, failed step) is logged by the service
        that raised this and kept in `context` for server-side logs only.
    """

    def __init__(
        self,
        message: str = "An internal error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RateLimitExceededError(PastoralAdminError):
    """
    Raised when a client exceeds the per-IP request rate limit.

    HTTP:    429 Too Many Requests

    Response includes:
        - retry_after: Seconds until the rate limit window frees a slot
        - Retry-After header for HTTP-compliant clients
    """

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Rate limit exceeded. Please wait {retry_after} seconds before making more requests."
        )
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after
