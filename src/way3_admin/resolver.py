"""Resolve raw admin responses into decoded values.

The backend is migrating from server-rendered HTML admin pages to a JSON
API one route at a time, so the decode path is chosen from the response's
content type rather than from the endpoint:

- ``application/json``: status-checked and decoded as-is
- ``text/html``: parsed and handed to the extractor registered for the
  resource (no extractor means None)
- anything else: UnsupportedResponseTypeError
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Union

from bs4 import BeautifulSoup

from way3_admin.errors import (
    AdminAPIError,
    DecodeError,
    HttpStatusError,
    UnsupportedResponseTypeError,
)
from way3_admin.extractors import get_extractor
from way3_admin.providers.base import RawResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JsonBody:
    """Response from the JSON API."""

    status_code: int
    text: str


@dataclass(frozen=True)
class HtmlBody:
    """Response from a legacy HTML admin page."""

    text: str


@dataclass(frozen=True)
class UnsupportedBody:
    """Response with any other content type."""

    content_type: str | None


DecodedBody = Union[JsonBody, HtmlBody, UnsupportedBody]


def classify(response: RawResponse) -> DecodedBody:
    """Classify a response by its content type.

    Args:
        response: Raw transport response

    Returns:
        JsonBody, HtmlBody or UnsupportedBody
    """
    content_type = (response.content_type or "").lower()
    if "application/json" in content_type:
        return JsonBody(status_code=response.status_code, text=response.body_text)
    if "text/html" in content_type:
        return HtmlBody(text=response.body_text)
    return UnsupportedBody(content_type=response.content_type)


def decode_json(body: JsonBody, endpoint: str) -> Any:
    if not 200 <= body.status_code < 300:
        raise HttpStatusError(body.status_code, endpoint=endpoint)
    try:
        return json.loads(body.text)
    except ValueError as e:
        raise DecodeError(f"Malformed JSON body: {e}", endpoint=endpoint) from e


def decode_html(body: HtmlBody, resource_name: str, endpoint: str) -> Any:
    extractor = get_extractor(resource_name)
    if extractor is None:
        return None

    doc = BeautifulSoup(body.text, "lxml")
    try:
        return extractor(doc)
    except Exception as e:
        raise DecodeError(
            f"Could not extract {resource_name} from HTML: {type(e).__name__}: {e}",
            endpoint=endpoint,
        ) from e


def resolve(
    response: RawResponse,
    resource_name: str,
    log: logging.Logger | None = None,
    endpoint: str | None = None,
) -> Any:
    """Decode a response for the given resource.

    Args:
        response: Raw transport response
        resource_name: Resource the request was made for; selects the HTML extractor
        log: Logger to report failures to (default: module logger)
        endpoint: Request endpoint reported in failures (default: resource_name)

    Returns:
        Decoded JSON value, extracted record(s), or None for an HTML page
        with no registered extractor

    Raises:
        HttpStatusError: JSON response with a non-2xx status
        DecodeError: Malformed JSON, or HTML the extractor could not handle
        UnsupportedResponseTypeError: Content type is neither JSON nor HTML
    """
    log = log or logger
    endpoint = endpoint or resource_name
    body = classify(response)

    try:
        if isinstance(body, JsonBody):
            return decode_json(body, endpoint)
        if isinstance(body, HtmlBody):
            return decode_html(body, resource_name, endpoint)
        raise UnsupportedResponseTypeError(body.content_type, endpoint=endpoint)
    except AdminAPIError as e:
        log.error(
            f"API request failed for {endpoint}: {e}",
            extra={"endpoint": endpoint, "resource": resource_name, "status_code": response.status_code},
        )
        raise
