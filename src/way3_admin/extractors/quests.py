"""Extractor for the legacy quest management dashboard."""

from __future__ import annotations

from functools import partial

from bs4 import BeautifulSoup

from way3_admin.coercion import parse_leading_int, to_int_stripping_suffix
from way3_admin.extractors.stats import LabelTable, read_stat_cards
from way3_admin.models import QuestStats

QUEST_LABELS: LabelTable = {
    "전체 퀘스트": ("total_quests", parse_leading_int),
    "활성 퀘스트": ("active_quests", parse_leading_int),
    "오늘 완료된 퀘스트": ("completed_today", parse_leading_int),
    "평균 완료율": ("average_completion_rate", partial(to_int_stripping_suffix, suffix="%")),
}


def extract_quests(doc: BeautifulSoup) -> QuestStats:
    """Build QuestStats from the quest page's stat cards."""
    return QuestStats(**read_stat_cards(doc, QUEST_LABELS))
