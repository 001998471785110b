# hide_dated/match/dates.py
"""
Full-date detection for listing titles.

A title is "dated" when it carries year, month and day together, e.g.:

    2025年2月12日 / 2025-2-12 / 2025/02/12 / 2025.2.12 / 2025_2_12 / 2025 2 12

Year+month alone, bare digit runs (20250212) and calendrically impossible
dates (2025/2/31) do not count.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, timedelta

# Separators are tested independently at each position, so mixed styles such
# as "2025/2.12" still match. Digits are ASCII only.
DATE_RE = re.compile(
    r"(?<![0-9])"
    r"(?P<year>[0-9]{4})\s*(?:年|[/\-._\s])\s*"
    r"(?P<month>[0-9]{1,2})\s*(?:月|[/\-._\s])\s*"
    r"(?P<day>[0-9]{1,2})\s*(?:日)?"
    r"(?![0-9])"
)


@dataclass(frozen=True)
class DateMatch:
    """A (year, month, day) triple found in a title."""

    year: int
    month: int
    day: int
    valid: bool
    text: str = ""

    def as_date(self) -> date | None:
        if not self.valid:
            return None
        return date(self.year, self.month, self.day)


def is_valid_ymd(year: int, month: int, day: int) -> bool:
    """
    True when (year, month, day) names a real calendar day.

    Out-of-range days are rolled forward by date arithmetic (Feb 31 becomes
    Mar 3) and the result is compared against the input triple, so leap years
    and month lengths come from the datetime module rather than a local table.
    """
    if month < 1 or month > 12:
        return False
    if day < 1 or day > 31:
        return False

    try:
        normalized = date(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        # year 0000, or a roll past 9999-12-31
        return False
    return (normalized.year, normalized.month, normalized.day) == (year, month, day)


def find_date(text: str | None) -> DateMatch | None:
    """
    Return the first year/month/day fragment in `text`, or None.

    Only the first fragment is considered. Month/day values outside
    [1,12]/[1,31] are dropped here; otherwise `valid` records the calendar
    check.
    """
    if not text:
        return None

    m = DATE_RE.search(text)
    if not m:
        return None

    year = int(m.group("year"))
    month = int(m.group("month"))
    day = int(m.group("day"))
    if month < 1 or month > 12 or day < 1 or day > 31:
        return None

    return DateMatch(
        year=year,
        month=month,
        day=day,
        valid=is_valid_ymd(year, month, day),
        text=m.group(0).strip(),
    )


def evaluate(text: str | None) -> DateMatch | None:
    """Return a valid full date found in `text`, or None (NoMatch)."""
    found = find_date(text)
    if found is None or not found.valid:
        return None
    return found


def title_has_full_date(text: str | None) -> bool:
    return evaluate(text) is not None


__all__ = [
    "DATE_RE",
    "DateMatch",
    "evaluate",
    "find_date",
    "is_valid_ymd",
    "title_has_full_date",
]
