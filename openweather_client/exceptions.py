"""
Exception hierarchy for the OpenWeatherMap client.
"""

from typing import Optional


class WeatherAPIError(Exception):
    """Base exception for weather API errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ConfigurationError(WeatherAPIError):
    """Raised when a client is configured without an API key."""


class InvalidQueryError(WeatherAPIError):
    """Raised when lookup input fails local validation, before any request."""


class AuthenticationError(WeatherAPIError):
    """Raised when the provider rejects the API key (HTTP 401)."""

    def __init__(self, message: str = "Invalid API key"):
        super().__init__(message, status_code=401)


class NotFoundError(WeatherAPIError):
    """Raised when no location matched the query (HTTP 404)."""

    def __init__(self, message: str = "No location matched the query"):
        super().__init__(message, status_code=404)


class UnexpectedResponseError(WeatherAPIError):
    """Raised for any other non-200 status; carries the raw status code."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        super().__init__(
            message or f"Unexpected response status: {status_code}",
            status_code=status_code,
        )


class MalformedResponseError(WeatherAPIError):
    """Raised when the body is not valid JSON or lacks a required field."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)
