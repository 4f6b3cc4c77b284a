"""Environment-driven configuration for the admin client."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:4000"
DEFAULT_ADMIN_PATH = "/admin"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class AdminSettings:
    """Where the admin backend lives and how to reach it."""

    base_url: str = DEFAULT_BASE_URL
    admin_path: str = DEFAULT_ADMIN_PATH
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True

    @property
    def admin_url(self) -> str:
        return f"{self.base_url}{self.admin_path}"

    @property
    def health_url(self) -> str:
        return f"{self.base_url}/health"


def _parse_timeout(raw: str | None) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid ADMIN_API_TIMEOUT={raw!r}, using {DEFAULT_TIMEOUT}s")
        return DEFAULT_TIMEOUT
    if timeout <= 0:
        logger.warning(f"Ignoring non-positive ADMIN_API_TIMEOUT={raw!r}, using {DEFAULT_TIMEOUT}s")
        return DEFAULT_TIMEOUT
    return timeout


def load_settings() -> AdminSettings:
    """Read settings from environment variables.

    Environment variables:
        ADMIN_API_URL: Backend base URL (default: http://localhost:4000)
        ADMIN_PATH: Admin route prefix (default: /admin)
        ADMIN_API_TIMEOUT: Request timeout in seconds (default: 30)
        ADMIN_VERIFY_SSL: Verify TLS certificates (default: true)

    Returns:
        AdminSettings built from the environment
    """
    base_url = (os.getenv("ADMIN_API_URL") or DEFAULT_BASE_URL).rstrip("/")
    admin_path = os.getenv("ADMIN_PATH", DEFAULT_ADMIN_PATH)
    verify_ssl = os.getenv("ADMIN_VERIFY_SSL", "true").lower() in ("true", "1", "yes")

    return AdminSettings(
        base_url=base_url,
        admin_path=admin_path,
        timeout=_parse_timeout(os.getenv("ADMIN_API_TIMEOUT")),
        verify_ssl=verify_ssl,
    )
