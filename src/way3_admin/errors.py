"""Exceptions raised while resolving admin API responses."""

from __future__ import annotations


class AdminAPIError(Exception):
    """Base class for failures resolving an admin response."""

    def __init__(self, message: str, endpoint: str | None = None) -> None:
        super().__init__(message)
        self.endpoint = endpoint


class HttpStatusError(AdminAPIError):
    """JSON response with a non-success status code."""

    def __init__(self, status_code: int, endpoint: str | None = None) -> None:
        super().__init__(f"HTTP error! status: {status_code}", endpoint)
        self.status_code = status_code


class DecodeError(AdminAPIError):
    """Body could not be decoded into the expected shape."""


class UnsupportedResponseTypeError(AdminAPIError):
    """Response is neither JSON nor HTML."""

    def __init__(self, content_type: str | None, endpoint: str | None = None) -> None:
        super().__init__(f"Unsupported response type: {content_type or '<none>'}", endpoint)
        self.content_type = content_type
