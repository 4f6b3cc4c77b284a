"""Pydantic models for admin requests and legacy page records."""

from __future__ import annotations

import time
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class HttpMethod(str, Enum):
    """HTTP methods used by the admin client."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class AdminResource(str, Enum):
    """Readable admin resources."""

    DASHBOARD = "dashboard"
    PLAYERS = "players"
    MERCHANTS = "merchants"
    ITEMS = "items"
    MONITORING = "monitoring"
    QUESTS = "quests"
    SKILLS = "skills"

    @property
    def path(self) -> str:
        """Endpoint path below the admin prefix."""
        return RESOURCE_PATHS[self]


RESOURCE_PATHS: dict[AdminResource, str] = {
    AdminResource.DASHBOARD: "",
    AdminResource.PLAYERS: "/players",
    AdminResource.MERCHANTS: "/crud/merchants",
    AdminResource.ITEMS: "/crud/items",
    AdminResource.MONITORING: "/monitoring",
    AdminResource.QUESTS: "/quests",
    AdminResource.SKILLS: "/skills",
}


class AdminRequest(BaseModel):
    """A single request against the admin path."""

    model_config = ConfigDict(frozen=True)

    resource_name: str = Field(description="Resource name used for extractor lookup and logging")
    path: str = Field(description="Endpoint path below the admin prefix")
    query_parameters: dict[str, str] = Field(default_factory=dict, description="Query string parameters")
    write_body: Any | None = Field(default=None, description="JSON-serializable request body")
    http_method: HttpMethod = Field(default=HttpMethod.GET, description="HTTP method")

    @classmethod
    def for_resource(
        cls, resource: AdminResource, params: dict[str, Any] | None = None
    ) -> AdminRequest:
        """Build a read request for a resource, dropping None-valued params."""
        query = {key: str(value) for key, value in (params or {}).items() if value is not None}
        return cls(resource_name=resource.value, path=resource.path, query_parameters=query)

    @property
    def endpoint(self) -> str:
        """Path plus the encoded query string, if there is one."""
        if not self.query_parameters:
            return self.path
        return f"{self.path}?{urlencode(self.query_parameters)}"


class _LegacyRecord(BaseModel):
    """Immutable record serialized with camelCase keys."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class DashboardStats(_LegacyRecord):
    """Summary numbers read from the legacy dashboard page."""

    total_players: int = Field(default=0, ge=0)
    daily_trades: int = Field(default=0, ge=0)
    daily_revenue: int = Field(default=0, ge=0)
    active_merchants: int = Field(default=0, ge=0)
    server_status: str = "running"
    # Placeholder: the legacy page has no uptime, so this is the current epoch time.
    server_uptime: int = Field(default_factory=lambda: round(time.time()))


class PlayerRecord(_LegacyRecord):
    """One row of the legacy player table.

    ``id`` is the 1-based position among extracted rows. It is synthetic and
    is not a backend identifier.
    """

    id: int = Field(ge=1)
    name: str
    level: int = Field(default=0, ge=0)
    current_license: int = Field(default=0, ge=0)
    money: int = Field(default=0, ge=0)
    total_trades: int = Field(default=0, ge=0)
    last_active: str = ""


class QuestStats(_LegacyRecord):
    """Summary numbers read from the legacy quest dashboard page."""

    total_quests: int = Field(default=0, ge=0)
    active_quests: int = Field(default=0, ge=0)
    completed_today: int = Field(default=0, ge=0)
    average_completion_rate: int = Field(default=0, ge=0)


class HealthResult(BaseModel):
    """Server health probe result.

    On success this passes the backend's own status through, along with any
    extra fields it reports. On failure status is "error".
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    status: str = Field(description="Backend status, or 'error' if the probe failed")
    message: str | None = Field(default=None, description="Failure description")

    @classmethod
    def from_error(cls, error: BaseException) -> HealthResult:
        message = str(error) or type(error).__name__
        return cls(status="error", message=message)
