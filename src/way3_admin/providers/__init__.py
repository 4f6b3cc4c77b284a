"""HTTP transports for talking to the admin backend."""

from way3_admin.providers.base import HttpTransport, RawResponse
from way3_admin.providers.requests_provider import RequestsProvider

__all__ = ["HttpTransport", "RawResponse", "RequestsProvider"]
