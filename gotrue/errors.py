"""
GoTrue Client Error Classes

Errors raised by the client and its default HTTP transport.
"""

from typing import Any, Dict, Optional


class GoTrueError(Exception):
    """Base error class for the GoTrue client."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r})"


class GoTrueHttpError(GoTrueError):
    """
    Raised when the service answers with a bad status code (> 301).

    Custom transports have to raise this error themselves; the client
    propagates it unchanged.
    """

    def __init__(self, status: int, http_body: Optional[str] = None) -> None:
        super().__init__(f"Unexpected response status: {status}")
        self.status = status
        self.http_body = http_body

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "name": self.__class__.__name__,
            "message": self.message,
            "status": self.status,
            "http_body": self.http_body,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(status={self.status!r}, http_body={self.http_body!r})"


class ConfigurationError(GoTrueError):
    """Configuration error."""


def is_gotrue_error(error: Any) -> bool:
    """Check if error is a GoTrueError."""
    return isinstance(error, GoTrueError)
