"""Extractors turning legacy admin HTML pages into typed records.

Each extractor is a pure function from a parsed document to a record or a
list of records. The registry maps a resource name to its extractor; a
resource without one resolves to None.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from bs4 import BeautifulSoup

from way3_admin.extractors.dashboard import DASHBOARD_LABELS, extract_dashboard
from way3_admin.extractors.players import extract_players
from way3_admin.extractors.quests import QUEST_LABELS, extract_quests
from way3_admin.models import AdminResource

Extractor = Callable[[BeautifulSoup], Any]

EXTRACTORS: dict[str, Extractor] = {
    AdminResource.DASHBOARD.value: extract_dashboard,
    AdminResource.PLAYERS.value: extract_players,
    AdminResource.QUESTS.value: extract_quests,
}


def get_extractor(resource_name: str) -> Extractor | None:
    """Return the extractor registered for a resource, if any."""
    return EXTRACTORS.get(resource_name)


def register_extractor(resource_name: str, extractor: Extractor) -> None:
    """Register (or replace) the extractor for a legacy resource page."""
    EXTRACTORS[resource_name] = extractor


__all__ = [
    "DASHBOARD_LABELS",
    "EXTRACTORS",
    "Extractor",
    "QUEST_LABELS",
    "extract_dashboard",
    "extract_players",
    "extract_quests",
    "get_extractor",
    "register_extractor",
]
