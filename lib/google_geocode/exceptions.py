"""
Google Geocoding API Exceptions

This module contains custom exception classes for Google Geocoding API errors.
Decode errors mean the response body could not be turned into a GeocodeResponse,
transport errors mean there was no body to decode at all.
"""

from typing import Optional


class GeocodeError(Exception):
    """Base exception class for all geocoding errors, dood!

    Attributes:
        message: Human-readable error message
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class GeocodeDecodeError(GeocodeError, ValueError):
    """Raised when a response body can't be decoded into the response model.

    This typically occurs when:
    - The body isn't valid JSON or isn't a JSON object
    - The ``status`` token is not one of the documented statuses
    - A required field is missing or has the wrong JSON type

    Attributes:
        path: Dotted path of the failing field (e.g. ``results[0].place_id``), if known
    """

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} (at: {self.path})"
        return self.message


class GeocodeTransportError(GeocodeError):
    """Raised when the HTTP fetch didn't produce a body to decode.

    Attributes:
        statusCode: HTTP status code if the server answered, None for
            timeouts and network failures
    """

    def __init__(self, message: str, statusCode: Optional[int] = None) -> None:
        super().__init__(message)
        self.statusCode = statusCode

    def __str__(self) -> str:
        if self.statusCode is not None:
            return f"{self.message} (HTTP {self.statusCode})"
        return self.message
