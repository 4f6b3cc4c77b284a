"""Admin data-access client for the Way game backend.

Provides one async interface over a backend that serves some admin routes
as JSON and others as legacy server-rendered HTML pages.
"""

from way3_admin.client import AdminClient, get_admin_client, reset_admin_client
from way3_admin.config import AdminSettings, load_settings
from way3_admin.errors import (
    AdminAPIError,
    DecodeError,
    HttpStatusError,
    UnsupportedResponseTypeError,
)
from way3_admin.models import (
    AdminRequest,
    AdminResource,
    DashboardStats,
    HealthResult,
    HttpMethod,
    PlayerRecord,
    QuestStats,
)
from way3_admin.resolver import resolve

__all__ = [
    # Client
    "AdminClient",
    "get_admin_client",
    "reset_admin_client",
    "resolve",
    # Configuration
    "AdminSettings",
    "load_settings",
    # Errors
    "AdminAPIError",
    "DecodeError",
    "HttpStatusError",
    "UnsupportedResponseTypeError",
    # Models
    "AdminRequest",
    "AdminResource",
    "DashboardStats",
    "HealthResult",
    "HttpMethod",
    "PlayerRecord",
    "QuestStats",
]
