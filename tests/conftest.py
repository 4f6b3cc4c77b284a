"""Pytest configuration and fixtures for way3-admin tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from bs4 import BeautifulSoup

from way3_admin.config import AdminSettings
from way3_admin.providers import RawResponse


@pytest.fixture
def make_response() -> Callable[..., RawResponse]:
    """Factory for RawResponse objects (HTML, 200 OK by default)."""

    def _make(
        body: str,
        content_type: str | None = "text/html; charset=utf-8",
        status_code: int = 200,
        url: str = "http://admin.test/admin",
    ) -> RawResponse:
        return RawResponse(
            url=url,
            status_code=status_code,
            content_type=content_type,
            body_text=body,
        )

    return _make


@pytest.fixture
def parse_html() -> Callable[[str], BeautifulSoup]:
    """Parse HTML the same way the resolver does."""
    return lambda html: BeautifulSoup(html, "lxml")


@pytest.fixture
def settings() -> AdminSettings:
    """Settings pointing at a test backend."""
    return AdminSettings(base_url="http://admin.test", admin_path="/admin", timeout=5)


@pytest.fixture
def dashboard_html() -> str:
    """Legacy dashboard page with known, unknown and malformed stat cards."""
    return """
    <!DOCTYPE html>
    <html>
    <head><meta charset="utf-8"><title>Way Game Admin</title></head>
    <body>
        <div class="dashboard-grid">
            <div class="stat-card">
                <div class="stat-value">42</div>
                <div class="stat-label">총 플레이어</div>
            </div>
            <div class="stat-card">
                <div class="stat-value"> 7 </div>
                <div class="stat-label"> 오늘 거래 횟수 </div>
            </div>
            <div class="stat-card">
                <div class="stat-value">1,234,500원</div>
                <div class="stat-label">오늘 총 거래량</div>
            </div>
            <div class="stat-card">
                <div class="stat-value">15</div>
                <div class="stat-label">활성 상인</div>
            </div>
            <div class="stat-card">
                <div class="stat-value">99</div>
                <div class="stat-label">서버 메모리</div>
            </div>
        </div>
    </body>
    </html>
    """


@pytest.fixture
def players_html() -> str:
    """Legacy player table with complete, short and duplicate rows."""
    return """
    <html>
    <body>
        <table class="admin-table">
            <thead>
                <tr><th>이름</th><th>레벨</th><th>라이센스</th><th>소지금</th><th>거래</th><th>최근 접속</th></tr>
            </thead>
            <tbody>
                <tr>
                    <td>Alice</td><td>Lv.10</td><td>Level 2</td>
                    <td>1,000원</td><td>5회</td><td>2024-01-01</td>
                </tr>
                <tr><td colspan="6">데이터 없음</td></tr>
                <tr>
                    <td> Bob </td><td>Lv.3</td><td>Level 0</td>
                    <td>250원</td><td>0회</td><td> 2024-02-03 10:00 </td>
                </tr>
                <tr>
                    <td> Bob </td><td>Lv.3</td><td>Level 0</td>
                    <td>250원</td><td>0회</td><td> 2024-02-03 10:00 </td>
                </tr>
            </tbody>
        </table>
    </body>
    </html>
    """


@pytest.fixture
def quests_html() -> str:
    """Legacy quest dashboard stat cards."""
    return """
    <html>
    <body>
        <div class="dashboard-grid">
            <div class="stat-card">
                <div class="stat-value">24</div>
                <div class="stat-label">전체 퀘스트</div>
            </div>
            <div class="stat-card">
                <div class="stat-value">18</div>
                <div class="stat-label">활성 퀘스트</div>
            </div>
            <div class="stat-card">
                <div class="stat-value">3</div>
                <div class="stat-label">오늘 완료된 퀘스트</div>
            </div>
            <div class="stat-card">
                <div class="stat-value">67%</div>
                <div class="stat-label">평균 완료율</div>
            </div>
        </div>
    </body>
    </html>
    """


@pytest.fixture
def legacy_players_page_html() -> str:
    """Player page as rendered by GET /admin/players: rows directly under <table>."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>플레이어 관리 - Way Game Admin</title>
    </head>
    <body>
        <div class="back-link"><a href="/admin">← 대시보드로 돌아가기</a></div>
        <h1>👥 플레이어 관리</h1>
        <p>총 2명의 플레이어</p>
        <table>
            <tr>
                <th>이름</th>
                <th>레벨</th>
                <th>라이센스</th>
                <th>보유금</th>
                <th>거래횟수</th>
                <th>최종 접속</th>
            </tr>
            <tr>
                <td>Alice</td>
                <td>10</td>
                <td>Level 2</td>
                <td>1,000원</td>
                <td>5</td>
                <td>2024. 1. 1. 오전 9:00:00</td>
            </tr>
            <tr>
                <td>Bob</td>
                <td>3</td>
                <td>Level 0</td>
                <td>250원</td>
                <td>0</td>
                <td>2024. 2. 3. 오전 10:00:00</td>
            </tr>
        </table>
    </body>
    </html>
    """
