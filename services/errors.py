"""Exception types shared by the API client and the navigation controller."""
from typing import Optional


class ApiError(Exception):
    """Backend answered with a non-2xx status."""

    def __init__(self, status: int, message: str = "", endpoint: Optional[str] = None):
        self.status = status
        self.message = message
        self.endpoint = endpoint
        super().__init__(f"API Error: {status} {endpoint or ''} - {message}".strip())


class NotFoundError(ApiError):
    """404 from the backend. For /auth/me this means the session is inconsistent."""


class NetworkError(Exception):
    """Backend unreachable or timed out."""

    def __init__(self, endpoint: str, cause: Exception):
        self.endpoint = endpoint
        self.cause = cause
        super().__init__(f"Request to {endpoint} failed: {cause}")


class UnknownScreenError(ValueError):
    """A transition named something outside the Screen set."""
