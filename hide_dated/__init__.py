from __future__ import annotations

from .match import DateMatch, evaluate, find_date, is_valid_ymd
from .scan import InsertionFeed, ObservedDocument, ScanDriver, TreeScanner, hide_dated_titles, scan

"""
Hide listing entries whose titles carry a full calendar date.

Public API:
- evaluate(text) -> DateMatch | None
- TreeScanner / scan(root): one incremental pass over a subtree
- ScanDriver / hide_dated_titles(document, path, feed): page lifetime wiring
"""

__all__ = [
    "DateMatch",
    "InsertionFeed",
    "ObservedDocument",
    "ScanDriver",
    "TreeScanner",
    "evaluate",
    "find_date",
    "hide_dated_titles",
    "is_valid_ymd",
    "scan",
]

__version__ = "0.1.0"
