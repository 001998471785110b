# hide_dated/scan/driver.py
"""
Page-level orchestration: one full scan at load, then a scan of every
element inserted afterwards.

Detail pages (path contains DETAIL_PATH_MARKER) are never scanned; the
filter targets listings, not an item's own page. The path is re-read before
every scan so a single-page app that navigates into an item stops hiding.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, Callable, Iterable
from typing import Any
from urllib.parse import urlsplit

from bs4 import Tag

from hide_dated.config import ScanConfig

from .mutations import Batch, InsertionFeed
from .scanner import ScanReport, TreeScanner

log = logging.getLogger(__name__)

PathSource = str | Callable[[], str]


def is_suppressed_path(path: str | None, marker: str) -> bool:
    if not path or not marker:
        return False
    try:
        p = urlsplit(path).path or path
    except ValueError:
        p = path
    return marker in p


class ScanDriver:
    def __init__(
        self,
        document: Any,
        path: PathSource = "/",
        *,
        scanner: TreeScanner | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        self.document = document
        self.config = config or (scanner.config if scanner else ScanConfig())
        self.scanner = scanner or TreeScanner(self.config)
        self._path = path
        self.started = False
        self.report = ScanReport()
        self.batches = 0

    @property
    def path(self) -> str:
        if callable(self._path):
            try:
                return self._path() or ""
            except Exception as exc:
                log.debug("Path provider failed: %s", exc)
                return ""
        return self._path or ""

    def suppressed(self) -> bool:
        return is_suppressed_path(self.path, self.config.detail_path_marker)

    def _scan(self, root: Any) -> None:
        if self.suppressed():
            return
        try:
            self.report.merge(self.scanner.scan(root))
        except Exception as exc:
            log.debug("Scan of <%s> aborted: %s", getattr(root, "name", "?"), exc)

    # ---- lifecycle -------------------------------------------------------------------

    def start(self, feed: InsertionFeed | None = None) -> ScanDriver:
        """Initial full scan plus a subscription for later insertions. Runs once."""
        if self.started:
            return self
        self.started = True

        if self.suppressed():
            log.info("Detail page %s; leaving dated titles visible", self.path)
            return self

        self._scan(self.document)
        log.info(
            "Initial scan: %d candidate(s), %d hidden",
            self.report.candidates,
            self.report.hidden,
        )

        if feed is not None:
            # No unsubscribe: the subscription lives as long as the page.
            feed.subscribe(self.handle_batch)
        return self

    def handle_batch(self, nodes: Batch) -> None:
        self.batches += 1
        for node in nodes:
            # Text, comments and doctypes carry no titles.
            if not isinstance(node, Tag):
                continue
            self._scan(node)

    def consume(self, batches: Iterable[Batch]) -> ScanReport:
        for batch in batches:
            self.handle_batch(batch)
        return self.report

    async def aconsume(self, batches: AsyncIterable[Batch]) -> ScanReport:
        async for batch in batches:
            self.handle_batch(batch)
        return self.report


def hide_dated_titles(
    document: Any,
    path: PathSource = "/",
    feed: InsertionFeed | None = None,
    *,
    config: ScanConfig | None = None,
) -> ScanDriver:
    """Start a driver over `document` and return it."""
    return ScanDriver(document, path, config=config).start(feed)


__all__ = ["PathSource", "ScanDriver", "hide_dated_titles", "is_suppressed_path"]
