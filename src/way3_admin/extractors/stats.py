"""Shared reader for the legacy admin "stat card" widgets."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from bs4 import BeautifulSoup

from way3_admin.coercion import trim_text

# label text -> (field name, coercion)
LabelTable = Mapping[str, tuple[str, Callable[[str], int]]]


def iter_stat_cards(doc: BeautifulSoup) -> list[tuple[str, str]]:
    """Return (label, value) text pairs for every ``.stat-card``.

    Cards missing a label or a value, or with an empty one, are skipped.
    """
    cards = []
    for card in doc.select(".stat-card"):
        label_node = card.select_one(".stat-label")
        value_node = card.select_one(".stat-value")
        if label_node is None or value_node is None:
            continue
        label = trim_text(label_node.get_text())
        value = trim_text(value_node.get_text())
        if label and value:
            cards.append((label, value))
    return cards


def read_stat_cards(doc: BeautifulSoup, labels: LabelTable) -> dict[str, Any]:
    """Map stat-card values onto fields using an exact-match label table.

    Labels not in the table are ignored. Fields whose label never appears
    are absent from the result.
    """
    fields: dict[str, Any] = {}
    for label, value in iter_stat_cards(doc):
        entry = labels.get(label)
        if entry is None:
            continue
        name, coerce = entry
        fields[name] = coerce(value)
    return fields
