from __future__ import annotations


class CocClientError(Exception):
    """Base client error."""


class ConfigurationError(CocClientError):
    """Client cannot be built from the given settings (e.g. no API token)."""


class TransportError(CocClientError):
    """Anything raised by the HTTP transport."""


class NetworkError(TransportError):
    """Transport/network layer error."""


class DecodeError(TransportError):
    """A JSON body was expected but could not be parsed."""


class ApiError(TransportError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class AuthError(ApiError):
    """Auth-related API error."""
