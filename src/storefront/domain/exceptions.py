"""Domain-level exceptions.

Every failure the client can surface is a subclass of StorefrontException
so the CLI layer can catch them uniformly and display user-friendly messages.
Remote failures are further grouped under GatewayError.
"""

from __future__ import annotations


class StorefrontException(Exception):
    """Base class for all storefront errors."""


class ValidationError(StorefrontException):
    """A local input was rejected before any request was made."""


class EntityNotFoundError(StorefrontException):
    """A requested entity does not exist."""


class GatewayError(StorefrontException):
    """The payments backend could not satisfy a request."""


class NetworkError(GatewayError):
    """The request never produced a response (connection failure, timeout)."""


class ParseError(GatewayError):
    """The response body was not JSON or did not have the expected shape."""


class ApiError(GatewayError):
    """The backend answered with an explicit ``error`` field."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
