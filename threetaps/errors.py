# threetaps/errors.py
from typing import Optional


class ThreeTapsError(Exception):
    """Base class for every error raised by the client."""


class ValidationError(ThreeTapsError, ValueError):
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class MissingParameterError(ThreeTapsError, ValueError):
    def __init__(self, message: str = "You need to provide at least a query parameter"):
        super().__init__(message)


class RequestFailedError(ThreeTapsError):
    """The server answered with a non-2xx status. Never retried."""

    def __init__(self, status_code: int, reason: str, url: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        self.url = url
        super().__init__(f"{status_code} {reason}".strip())


class ResponseDecodeError(ThreeTapsError):
    """The server answered 2xx but the body is not valid JSON."""

    def __init__(self, body: str, url: Optional[str] = None):
        self.body = body
        self.url = url
        preview = body[:80] + ("..." if len(body) > 80 else "")
        super().__init__(f"Response body is not valid JSON: {preview!r}")
