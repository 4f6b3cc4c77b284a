"""Admin client facade over the JSON API and the legacy HTML admin pages."""

from __future__ import annotations

import json
import logging
from typing import Any

from way3_admin.config import AdminSettings, load_settings
from way3_admin.models import AdminRequest, AdminResource, HealthResult, HttpMethod
from way3_admin.providers import HttpTransport, RawResponse, RequestsProvider
from way3_admin.resolver import resolve

JSON_HEADERS = {"Content-Type": "application/json"}


class AdminClient:
    """Uniform async access to admin resources.

    Read methods return whatever the backend route produces: decoded JSON for
    migrated routes, or records extracted from legacy HTML pages. Writes
    always go to the JSON CRUD API. Every method except get_server_health
    propagates failures.
    """

    def __init__(
        self,
        settings: AdminSettings | None = None,
        transport: HttpTransport | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.transport = transport or RequestsProvider(
            timeout=self.settings.timeout,
            verify_ssl=self.settings.verify_ssl,
        )
        self.logger = logger or logging.getLogger(__name__)

    async def request(self, admin_request: AdminRequest) -> Any:
        """Send an admin request and resolve its response.

        Args:
            admin_request: Resource, path, query and optional body

        Returns:
            Decoded value for the resource

        Raises:
            AdminAPIError: If the response could not be resolved
            requests.RequestException: If the transport failed
        """
        endpoint = admin_request.endpoint
        url = f"{self.settings.admin_url}{endpoint}"
        body = None
        if admin_request.write_body is not None:
            body = json.dumps(admin_request.write_body)

        self.logger.info(
            f"{admin_request.http_method.value} {url}",
            extra={"endpoint": endpoint, "resource": admin_request.resource_name},
        )

        try:
            response = await self.transport.request(
                url,
                method=admin_request.http_method.value,
                headers=dict(JSON_HEADERS),
                body=body,
            )
        except Exception as e:
            self.logger.error(
                f"API request failed for {endpoint}: {type(e).__name__}: {e}",
                extra={"endpoint": endpoint, "resource": admin_request.resource_name},
            )
            raise

        return resolve(response, admin_request.resource_name, log=self.logger, endpoint=endpoint)

    async def _read(self, resource: AdminResource, params: dict[str, Any] | None = None) -> Any:
        return await self.request(AdminRequest.for_resource(resource, params))

    async def get_dashboard_data(self) -> Any:
        return await self._read(AdminResource.DASHBOARD)

    async def get_players(self, params: dict[str, Any] | None = None) -> Any:
        return await self._read(AdminResource.PLAYERS, params)

    async def get_merchants(self, params: dict[str, Any] | None = None) -> Any:
        return await self._read(AdminResource.MERCHANTS, params)

    async def get_items(self, params: dict[str, Any] | None = None) -> Any:
        return await self._read(AdminResource.ITEMS, params)

    async def get_monitoring_data(self) -> Any:
        return await self._read(AdminResource.MONITORING)

    async def get_quests(self, params: dict[str, Any] | None = None) -> Any:
        return await self._read(AdminResource.QUESTS, params)

    async def get_skills(self, params: dict[str, Any] | None = None) -> Any:
        return await self._read(AdminResource.SKILLS, params)

    # CRUD writes

    async def create_entity(self, resource: str, data: Any) -> Any:
        return await self.request(
            AdminRequest(
                resource_name=f"crud/{resource}",
                path=f"/crud/{resource}",
                write_body=data,
                http_method=HttpMethod.POST,
            )
        )

    async def update_entity(self, resource: str, entity_id: str | int, data: Any) -> Any:
        return await self.request(
            AdminRequest(
                resource_name=f"crud/{resource}",
                path=f"/crud/{resource}/{entity_id}",
                write_body=data,
                http_method=HttpMethod.PUT,
            )
        )

    async def delete_entity(self, resource: str, entity_id: str | int) -> Any:
        return await self.request(
            AdminRequest(
                resource_name=f"crud/{resource}",
                path=f"/crud/{resource}/{entity_id}",
                http_method=HttpMethod.DELETE,
            )
        )

    async def get_server_health(self) -> HealthResult:
        """Probe the backend's unauthenticated health endpoint.

        Never raises: transport errors, non-2xx statuses and undecodable
        bodies all come back as HealthResult(status="error", message=...).
        """
        try:
            response: RawResponse = await self.transport.request(self.settings.health_url)
            if not response.ok:
                raise RuntimeError(f"Health check failed with status {response.status_code}")
            return HealthResult.model_validate(json.loads(response.body_text))
        except Exception as e:
            self.logger.error(
                f"Health check error: {type(e).__name__}: {e}",
                extra={"endpoint": "/health"},
            )
            return HealthResult.from_error(e)


_admin_client: AdminClient | None = None


def get_admin_client() -> AdminClient:
    """Get the shared admin client, creating it from the environment on first use."""
    global _admin_client
    if _admin_client is None:
        _admin_client = AdminClient(load_settings())
    return _admin_client


def reset_admin_client() -> None:
    """Drop the shared admin client so the next call rebuilds it."""
    global _admin_client
    _admin_client = None
