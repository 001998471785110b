# hide_dated/scan/mutations.py
"""
Stand-in for the host's "nodes were inserted" notifications.

The rendering engine is outside this package. What the driver needs from it
is a way to subscribe to batches of inserted nodes; InsertionFeed is that
primitive, and ObservedDocument is a host-side helper that edits a
BeautifulSoup tree and publishes what it inserted (used by the CLI replay
and the tests).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from bs4 import BeautifulSoup, Tag
from bs4.element import PageElement

log = logging.getLogger(__name__)

Batch = Sequence[PageElement]
Subscriber = Callable[[Batch], None]


class InsertionFeed:
    """Synchronous publisher of inserted-node batches."""

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []
        self.published = 0

    def subscribe(self, callback: Subscriber) -> None:
        self._subscribers.append(callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def publish(self, nodes: Batch) -> None:
        """Deliver one batch to every subscriber, in registration order."""
        batch = list(nodes)
        self.published += 1
        for cb in list(self._subscribers):
            cb(batch)


class ObservedDocument:
    """A BeautifulSoup document whose insertions are announced on a feed."""

    def __init__(self, document: BeautifulSoup, feed: InsertionFeed | None = None) -> None:
        self.document = document
        self.feed = feed or InsertionFeed()

    @classmethod
    def from_html(cls, html: str, feed: InsertionFeed | None = None) -> ObservedDocument:
        return cls(BeautifulSoup(html or "", "html.parser"), feed)

    def append(self, parent: Tag, *nodes: Any) -> list[PageElement]:
        """
        Append nodes (or HTML fragments given as str) under `parent` and
        publish them as a single batch.
        """
        inserted: list[PageElement] = []
        for node in nodes:
            if isinstance(node, str) and not isinstance(node, PageElement):
                inserted.extend(self._append_fragment(parent, node))
            else:
                parent.append(node)
                inserted.append(node)

        if inserted:
            log.debug("Inserted %d node(s) under <%s>", len(inserted), parent.name)
            self.feed.publish(inserted)
        return inserted

    def insert_html(self, parent: Tag, html: str) -> list[PageElement]:
        return self.append(parent, html)

    def _append_fragment(self, parent: Tag, html: str) -> list[PageElement]:
        fragment = BeautifulSoup(html, "html.parser")
        out: list[PageElement] = []
        for child in list(fragment.contents):
            parent.append(child.extract())
            out.append(child)
        return out


__all__ = ["Batch", "InsertionFeed", "ObservedDocument", "Subscriber"]
