"""Pydantic data models for admin requests and responses.

This module defines the value objects returned by the admin client:
- Request description (AdminRequest, AdminResource, HttpMethod)
- Records extracted from legacy HTML pages (DashboardStats, PlayerRecord, QuestStats)
- Server health probe result (HealthResult)

All models are frozen and created fresh for every call.
"""

from way3_admin.models.admin import (
    RESOURCE_PATHS,
    AdminRequest,
    AdminResource,
    DashboardStats,
    HealthResult,
    HttpMethod,
    PlayerRecord,
    QuestStats,
)

__all__ = [
    # Request models
    "AdminRequest",
    "AdminResource",
    "HttpMethod",
    "RESOURCE_PATHS",
    # Legacy page records
    "DashboardStats",
    "PlayerRecord",
    "QuestStats",
    # Health
    "HealthResult",
]
