"""Base transport interface for admin HTTP requests."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RawResponse:
    """Undecoded HTTP response as returned by a transport."""

    url: str
    status_code: int
    content_type: str | None
    body_text: str
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """True for 2xx status codes."""
        return 200 <= self.status_code < 300


class HttpTransport(ABC):
    """Abstract base class for HTTP transports."""

    @abstractmethod
    async def request(
        self,
        url: str,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        body: str | None = None,
        **kwargs: Any,
    ) -> RawResponse:
        """Send one HTTP request.

        Args:
            url: Absolute URL to request
            method: HTTP method name
            headers: Request headers
            body: Already-encoded request body
            **kwargs: Additional transport-specific options

        Returns:
            RawResponse with status, content type and body text. Non-success
            statuses are returned, not raised.
        """
        pass

    @abstractmethod
    def supports_url(self, url: str) -> bool:
        """Check if this transport can send a request to the given URL.

        Args:
            url: The URL to check

        Returns:
            True if this transport can handle the URL
        """
        pass
