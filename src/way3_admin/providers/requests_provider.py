"""HTTP transport using the Python requests library."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import urlparse

import requests

from way3_admin.providers.base import HttpTransport, RawResponse

logger = logging.getLogger(__name__)


class RequestsProvider(HttpTransport):
    """Transport running blocking requests calls in the default executor."""

    def __init__(
        self,
        timeout: float = 30,
        verify_ssl: bool = True,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the requests transport.

        Args:
            timeout: Request timeout in seconds (default: 30)
            verify_ssl: Verify TLS certificates (default: True)
            session: Optional pre-built session to send requests with
        """
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.session = session or requests.Session()

    def supports_url(self, url: str) -> bool:
        """Check if this transport supports the given URL.

        Args:
            url: The URL to check

        Returns:
            True if the URL uses http or https scheme
        """
        try:
            parsed = urlparse(url)
            return parsed.scheme in ("http", "https")
        except Exception:
            return False

    async def request(
        self,
        url: str,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        body: str | None = None,
        **kwargs: Any,
    ) -> RawResponse:
        """Send a request with requests and wrap the response.

        Args:
            url: The URL to request
            method: HTTP method name
            headers: Request headers
            body: Already-encoded request body
            **kwargs: Additional options
                - timeout: Request timeout in seconds

        Returns:
            RawResponse for any status code

        Raises:
            requests.RequestException: If the request could not be completed
        """
        timeout = kwargs.get("timeout", self.timeout)

        loop = asyncio.get_event_loop()
        response = await loop.run_in_executor(
            None,
            lambda: self.session.request(
                method,
                url,
                headers=headers or {},
                data=body.encode("utf-8") if body is not None else None,
                timeout=timeout,
                verify=self.verify_ssl,
            ),
        )

        logger.debug(f"{method} {url} -> {response.status_code}")

        return RawResponse(
            url=url,
            status_code=response.status_code,
            content_type=response.headers.get("Content-Type"),
            body_text=response.text,
            headers=dict(response.headers),
        )
