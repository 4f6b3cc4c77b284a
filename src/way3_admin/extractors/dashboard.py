"""Extractor for the legacy admin dashboard page."""

from __future__ import annotations

from bs4 import BeautifulSoup

from way3_admin.coercion import parse_leading_int, to_int
from way3_admin.extractors.stats import LabelTable, read_stat_cards
from way3_admin.models import DashboardStats

DASHBOARD_LABELS: LabelTable = {
    "총 플레이어": ("total_players", parse_leading_int),
    "오늘 거래 횟수": ("daily_trades", parse_leading_int),
    "오늘 총 거래량": ("daily_revenue", to_int),
    "활성 상인": ("active_merchants", parse_leading_int),
}


def extract_dashboard(doc: BeautifulSoup) -> DashboardStats:
    """Build DashboardStats from the dashboard's stat cards.

    Missing stats default to 0. server_status is always "running" and
    server_uptime is a timestamp placeholder, as the page reports neither.
    """
    return DashboardStats(**read_stat_cards(doc, DASHBOARD_LABELS))
