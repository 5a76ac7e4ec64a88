"""
Custom Exceptions - Application-specific error classes.

Each exception carries the HTTP status it maps to. The API layer turns
them into the uniform {"Error": "<message>"} body.
"""
from typing import Optional


class DemoException(Exception):
    """
    Base exception for all application errors.

    Subclass this for specific error types.
    """
    status_code: int = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        """Convert to error response dict."""
        return {"Error": self.message}


class ReportNotFoundError(DemoException):
    """Raised when an API path does not name a report or station."""
    status_code = 404


class InvalidStationError(DemoException):
    """Raised when a station is not on the allow-list."""
    status_code = 406

    def __init__(self, station: str, message: str = "Not a valid station"):
        super().__init__(message, details=f"station={station}")
        self.station = station


class MissingBodyError(DemoException):
    """Raised when a request that needs a body arrives without one."""
    status_code = 400

    def __init__(self, message: str = "No request body given"):
        super().__init__(message)


class UnsupportedMediaTypeError(DemoException):
    """Raised when a body is sent with a content type we cannot parse."""
    status_code = 415

    def __init__(self, content_type: str):
        super().__init__(
            "Request body must be JSON",
            details=f"content_type={content_type or '-'}"
        )
        self.content_type = content_type


class MalformedBodyError(DemoException):
    """Raised when a JSON body cannot be decoded."""
    status_code = 400

    def __init__(self, message: str = "Malformed JSON body"):
        super().__init__(message)


class InvalidPayloadError(DemoException):
    """Raised when a decoded body does not have the expected shape."""
    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details=f"field={field}" if field else None)
        self.field = field
