# hide_dated/scan/scanner.py
"""
Incremental scanning of a listing tree.

Each candidate title is evaluated once for the life of the tree: the marker
attribute is stamped before the date check, so later passes over overlapping
subtrees (the initial scan, then scans of inserted nodes) skip it.

Usage:
    from hide_dated.scan import TreeScanner

    report = TreeScanner().scan(soup)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from bs4 import Tag

from hide_dated.config import ScanConfig
from hide_dated.match import evaluate

from .candidates import element_text, find_title_elements
from .containers import find_container, hide

log = logging.getLogger(__name__)

MARKER_VALUE = "1"


@dataclass
class ScanReport:
    """Per-pass counters; the tree mutations are the real output."""

    candidates: int = 0
    evaluated: int = 0
    skipped: int = 0
    dated: int = 0
    hidden: int = 0
    errors: int = 0
    dated_titles: list[str] = field(default_factory=list)

    def merge(self, other: ScanReport) -> None:
        self.candidates += other.candidates
        self.evaluated += other.evaluated
        self.skipped += other.skipped
        self.dated += other.dated
        self.hidden += other.hidden
        self.errors += other.errors
        self.dated_titles.extend(other.dated_titles)


class TreeScanner:
    """Finds dated titles under a root and hides their listing containers."""

    def __init__(self, config: ScanConfig | None = None) -> None:
        self.config = config or ScanConfig()

    # ---- marker ----------------------------------------------------------------------

    def is_marked(self, el: Any) -> bool:
        return isinstance(el, Tag) and el.get(self.config.processed_attr) == MARKER_VALUE

    def _mark(self, el: Tag) -> None:
        el[self.config.processed_attr] = MARKER_VALUE

    # ---- core ------------------------------------------------------------------------

    def scan(self, root: Any) -> ScanReport:
        report = ScanReport()
        titles = find_title_elements(
            root,
            min_length=self.config.min_length,
            max_length=self.config.max_length,
        )
        report.candidates = len(titles)

        for title_el in titles:
            try:
                self._process(title_el, report)
            except Exception as exc:
                # One odd element must not cost the rest of the pass.
                report.errors += 1
                log.debug("Skipping candidate after error: %s", exc)

        if report.evaluated:
            log.debug(
                "Scanned <%s>: candidates=%d evaluated=%d dated=%d hidden=%d",
                getattr(root, "name", "?"),
                report.candidates,
                report.evaluated,
                report.dated,
                report.hidden,
            )
        return report

    def _process(self, title_el: Tag, report: ScanReport) -> None:
        if self.is_marked(title_el):
            report.skipped += 1
            return

        text = element_text(title_el)
        self._mark(title_el)
        report.evaluated += 1

        if evaluate(text) is None:
            return
        report.dated += 1
        report.dated_titles.append(text)

        card = find_container(title_el)
        if card is None:
            log.debug("No container for dated title %r", text)
            return

        if hide(card):
            report.hidden += 1


def scan(root: Any, config: ScanConfig | None = None) -> ScanReport:
    """Module-level convenience around TreeScanner.scan()."""
    return TreeScanner(config).scan(root)


__all__ = ["MARKER_VALUE", "ScanReport", "TreeScanner", "scan"]
