# hide_dated/match/__init__.py
from __future__ import annotations

from .dates import DateMatch, evaluate, find_date, is_valid_ymd, title_has_full_date

"""
Pure text → date classification.

Public API:
- evaluate(text) -> DateMatch | None: a valid full date, or None
- find_date(text) -> DateMatch | None: first hit, validity recorded on the match
- is_valid_ymd(year, month, day) -> bool
"""

__all__ = ["DateMatch", "evaluate", "find_date", "is_valid_ymd", "title_has_full_date"]
