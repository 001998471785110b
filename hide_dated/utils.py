# hide_dated/utils.py
"""
Shared helpers for loading documents into the filter.
"""
from __future__ import annotations

import sys
from pathlib import Path
from urllib.parse import urlsplit

from bs4 import BeautifulSoup

from hide_dated.exceptions import DocumentLoadError


def is_http_url(source: str) -> bool:
    s = (source or "").strip().lower()
    return s.startswith("http://") or s.startswith("https://")


def page_path(source: str) -> str:
    """
    The page path a source stands for.

    URLs use their own path; files and stdin are treated as a root listing.
    """
    if is_http_url(source):
        return urlsplit(source).path or "/"
    return "/"


def read_text(source: str) -> str:
    """Read a local file (or stdin for "-") as text."""
    if source == "-":
        return sys.stdin.read()
    p = Path(source)
    try:
        raw = p.read_bytes()
    except OSError as exc:
        raise DocumentLoadError(f"Cannot read {source}: {exc}") from exc
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DocumentLoadError(f"{source} is not UTF-8 text") from exc


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "html.parser")


__all__ = [
    "is_http_url",
    "page_path",
    "parse_html",
    "read_text",
]
