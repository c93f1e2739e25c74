from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid; nothing is sent to the remote API."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid or no session is active."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class GatewayError(DomainError):
    """Base exception for failures talking to the remote API."""


class RequestFailed(GatewayError):
    """The remote API answered with a non-success status.

    ``body`` keeps the raw response text, which is what the API uses to
    explain the rejection (e.g. a duplicate email on registration).
    """

    def __init__(self, body: str, *, status_code: Optional[int] = None, url: str = ""):
        super().__init__(body or "Request failed")
        self.body = body
        self.status_code = status_code
        self.url = url


class TransportFailure(GatewayError):
    """The request never produced a response (DNS, refused connection, ...)."""

    def __init__(self, message: str, *, url: str = ""):
        super().__init__(message)
        self.url = url
