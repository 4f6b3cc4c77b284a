"""Extractor for the legacy player list table."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from way3_admin.coercion import (
    to_int,
    to_int_stripping_prefix,
    to_int_stripping_suffix,
    trim_text,
)
from way3_admin.models import PlayerRecord

MIN_PLAYER_CELLS = 6


def iter_body_rows(doc: BeautifulSoup) -> list[Tag]:
    """Return the table rows a browser would place in a ``tbody``.

    The legacy player page writes its rows directly under ``<table>``;
    browsers wrap those in an implicit ``tbody``, lxml does not. Rows in
    ``thead`` or ``tfoot`` are excluded.
    """
    return [
        row
        for row in doc.find_all("tr")
        if row.parent is not None and row.parent.name in ("tbody", "table")
    ]


def extract_players(doc: BeautifulSoup) -> list[PlayerRecord]:
    """Build a PlayerRecord for every complete table body row.

    Rows with fewer than six cells are skipped and do not consume an id.
    Identical rows are kept as separate records.
    """
    players: list[PlayerRecord] = []

    for row in iter_body_rows(doc):
        cells = [cell.get_text() for cell in row.find_all("td")]
        if len(cells) < MIN_PLAYER_CELLS:
            continue

        players.append(
            PlayerRecord(
                id=len(players) + 1,
                name=trim_text(cells[0]),
                level=to_int_stripping_prefix(cells[1].strip(), "Lv."),
                current_license=to_int_stripping_prefix(cells[2].strip(), "Level "),
                money=to_int(cells[3]),
                total_trades=to_int_stripping_suffix(cells[4].strip(), "회"),
                last_active=trim_text(cells[5]),
            )
        )

    return players
