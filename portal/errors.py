"""Domain errors raised by the portal core and mapped to HTTP statuses by the gateway."""
from fastapi import status


class PortalError(Exception):
    """Base class for errors that carry their own HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class Unauthorized(PortalError):
    """Credential did not resolve to an account."""

    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(PortalError):
    """A non-administrator attempted an administrative action."""

    status_code = status.HTTP_403_FORBIDDEN


class BadRequest(PortalError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(PortalError):
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(PortalError):
    """Identity already taken."""

    status_code = status.HTTP_409_CONFLICT


class StorageError(PortalError):
    """Persistence failure. The underlying message is passed through to the client."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
