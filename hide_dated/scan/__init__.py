# hide_dated/scan/__init__.py
from __future__ import annotations

from .candidates import find_title_elements
from .containers import find_container, hide, is_hidden
from .driver import ScanDriver, hide_dated_titles, is_suppressed_path
from .mutations import InsertionFeed, ObservedDocument
from .scanner import ScanReport, TreeScanner, scan

"""
Tree scanning slice.

Public API:
- TreeScanner / scan(root): evaluate unmarked candidate titles, hide dated cards
- ScanDriver / hide_dated_titles(document, path, feed): initial scan + insertions
- InsertionFeed / ObservedDocument: the insertion-notification primitive
"""

__all__ = [
    "InsertionFeed",
    "ObservedDocument",
    "ScanDriver",
    "ScanReport",
    "TreeScanner",
    "find_container",
    "find_title_elements",
    "hide",
    "hide_dated_titles",
    "is_hidden",
    "is_suppressed_path",
    "scan",
]
