# ruff: noqa: E402
# tests/conftest.py
from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

# Ensure project root importable
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def make_soup() -> Callable[[str], BeautifulSoup]:
    def _make(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    return _make


@pytest.fixture(autouse=True)
def _clean_hide_dated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Autouse: tests see the built-in defaults, not a developer's .env overrides."""
    for name in (
        "HIDE_DATED_MIN_LENGTH",
        "HIDE_DATED_MAX_LENGTH",
        "HIDE_DATED_DETAIL_PATH_MARKER",
        "HIDE_DATED_MARKER_ATTR",
        "HIDE_DATED_FETCH_MAX_RETRIES",
        "HIDE_DATED_FETCH_RETRY_BASE_S",
        "HIDE_DATED_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
