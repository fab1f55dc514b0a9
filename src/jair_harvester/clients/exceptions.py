"""Custom exceptions for the harvest pipeline."""


class HarvestError(Exception):
    """Base exception for all harvest errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class FetchError(HarvestError):
    """Raised when a network request fails."""

    pass


class APIError(FetchError):
    """Raised when the server returns a non-2xx response."""

    def __init__(self, message: str, status_code: int, *args, **kwargs):
        self.status_code = status_code
        super().__init__(message, *args, **kwargs)


class RateLimitError(APIError):
    """Raised when the server returns a 429 rate limit response."""

    def __init__(self, message: str = "Rate limit exceeded"):
        super().__init__(message, status_code=429)


class NotFoundError(APIError):
    """Raised when the server returns a 404 not found response."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class ParseError(HarvestError):
    """Raised when a listing page cannot be parsed as HTML."""

    pass


class ExtractionError(HarvestError):
    """Raised when a viewer page does not contain a PDF URL."""

    def __init__(self, message: str, url: str | None = None, *args, **kwargs):
        self.url = url
        super().__init__(message, *args, **kwargs)


class DecodeError(HarvestError):
    """Raised when an extracted URL has malformed percent-encoding."""

    def __init__(self, message: str, value: str | None = None, *args, **kwargs):
        self.value = value
        super().__init__(message, *args, **kwargs)


class StorageError(HarvestError):
    """Raised when a downloaded file cannot be created or written."""

    def __init__(self, message: str, path=None, *args, **kwargs):
        self.path = path
        super().__init__(message, *args, **kwargs)
