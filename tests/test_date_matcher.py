# tests/test_date_matcher.py
"""
Tests for full-date detection in titles.

These tests verify that the matcher:
1. Recognizes year+month+day in every supported separator style
2. Rejects calendrically impossible dates using roll-over comparison
3. Ignores bare years, digit runs and partial dates
"""

import calendar

import pytest

from hide_dated.match.dates import (
    DateMatch,
    evaluate,
    find_date,
    is_valid_ymd,
    title_has_full_date,
)

FORMATS = [
    "{y}年{m}月{d}日",
    "{y}/{m}/{d}",
    "{y}-{m}-{d}",
    "{y}.{m}.{d}",
    "{y}_{m}_{d}",
    "{y} {m} {d}",
]


class TestSeparatorStyles:
    @pytest.mark.parametrize("fmt", FORMATS)
    @pytest.mark.parametrize(
        "y,m,d",
        [
            (2025, 2, 12),
            (2024, 2, 29),
            (1999, 12, 31),
            (2025, 1, 1),
            (2023, 4, 30),
        ],
    )
    def test_embedded_date_is_found(self, fmt, y, m, d):
        text = "記事: " + fmt.format(y=y, m=m, d=d) + " の振り返り"
        match = evaluate(text)
        assert match is not None, text
        assert (match.year, match.month, match.day) == (y, m, d)
        assert match.valid is True

    @pytest.mark.parametrize("fmt", FORMATS)
    def test_zero_padded_components(self, fmt):
        text = fmt.format(y="2025", m="02", d="05")
        match = evaluate(text)
        assert match is not None
        assert (match.year, match.month, match.day) == (2025, 2, 5)

    def test_every_day_of_every_month(self):
        for y in (2023, 2024):
            for m in range(1, 13):
                last = calendar.monthrange(y, m)[1]
                for d in (1, 15, last):
                    match = evaluate(f"{y}年{m}月{d}日")
                    assert match is not None, (y, m, d)
                    assert (match.year, match.month, match.day) == (y, m, d)

    def test_mixed_separators_still_match(self):
        match = evaluate("2025/2.12 release notes")
        assert match is not None
        assert (match.year, match.month, match.day) == (2025, 2, 12)

    def test_whitespace_around_units(self):
        match = evaluate("2025 年 2 月 12 日 の出来事")
        assert match is not None
        assert (match.year, match.month, match.day) == (2025, 2, 12)

    def test_matched_fragment_is_reported(self):
        match = evaluate("2025年2月12日のまとめ")
        assert match == DateMatch(year=2025, month=2, day=12, valid=True, text="2025年2月12日")
        assert match.as_date().isoformat() == "2025-02-12"


class TestCalendarValidity:
    @pytest.mark.parametrize(
        "text",
        [
            "2025-02-31",
            "2025/2/31 の出来事",
            "2025-04-31",
            "2025年6月31日",
            "2025/2/29",
            "1900/2/29",
            "2023.11.31",
        ],
    )
    def test_impossible_days_are_rejected(self, text):
        assert evaluate(text) is None
        found = find_date(text)
        assert found is not None
        assert found.valid is False
        assert found.as_date() is None

    @pytest.mark.parametrize("y", [2000, 2024, 2028, 1996])
    def test_leap_day_in_leap_years(self, y):
        assert is_valid_ymd(y, 2, 29) is True

    @pytest.mark.parametrize("y", [1900, 2100, 2023, 2025])
    def test_leap_day_outside_leap_years(self, y):
        assert is_valid_ymd(y, 2, 29) is False

    @pytest.mark.parametrize(
        "y,m,d",
        [(2025, 0, 1), (2025, 13, 1), (2025, 1, 0), (2025, 1, 32)],
    )
    def test_out_of_range_components(self, y, m, d):
        assert is_valid_ymd(y, m, d) is False

    def test_year_zero_is_invalid(self):
        assert is_valid_ymd(0, 1, 1) is False
        assert evaluate("0000/1/1") is None

    def test_last_representable_day(self):
        assert is_valid_ymd(9999, 12, 31) is True

    def test_month_out_of_range_is_not_a_candidate(self):
        assert find_date("2025/13/01") is None
        assert find_date("2025/1/32") is None


class TestNonDates:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            None,
            "project 2024 budget v2",
            "id 20250212",
            "2025年2月の振り返り",
            "2025/02",
            "Python 3.12 入門",
            "JavaScriptの基礎",
            "tel 012025/2/12",
            "2025/2/123",
            "12025/2/12",
        ],
    )
    def test_no_full_date(self, text):
        assert evaluate(text) is None
        assert title_has_full_date(text) is False

    def test_fullwidth_digits_are_not_dates(self):
        assert evaluate("２０２５年２月１２日") is None

    def test_only_first_fragment_counts(self):
        # The first hit is impossible, so the title is not classified as dated.
        assert evaluate("2025/2/31 → 2025/3/1 に延期") is None

    def test_first_valid_fragment_wins(self):
        match = evaluate("2024-12-24 と 2025-01-05")
        assert match is not None
        assert (match.year, match.month, match.day) == (2024, 12, 24)
