# hide_dated/scan/candidates.py
"""
Candidate title discovery.

Listing markup changes often, so discovery stays conservative: links inside
h1/h2/h3 headings, plus any site-internal link, filtered by text length to
drop icon-only links and paragraph-sized link blocks.
"""

from __future__ import annotations

import logging
from typing import Any

from bs4 import Tag

from hide_dated.config import CANDIDATE_MAX_LENGTH, CANDIDATE_MIN_LENGTH

log = logging.getLogger(__name__)

TITLE_SELECTORS: tuple[str, ...] = (
    "h1 a",
    "h2 a",
    "h3 a",
    "a[href^='/']",
)


def element_text(el: Any) -> str:
    """Trimmed text content of an element ("" for anything without text)."""
    if el is None:
        return ""
    try:
        return (el.get_text() or "").strip()
    except AttributeError:
        return ""


def find_title_elements(
    root: Any,
    *,
    min_length: int = CANDIDATE_MIN_LENGTH,
    max_length: int = CANDIDATE_MAX_LENGTH,
    selectors: tuple[str, ...] = TITLE_SELECTORS,
) -> list[Tag]:
    """
    Collect candidate title elements below `root`, in document order.

    `root` itself is not a candidate; only its descendants are.
    """
    if root is None or not hasattr(root, "select"):
        return []

    try:
        nodes = root.select(",".join(selectors))
    except Exception as exc:
        # soupsieve rejects the selector or the tree is half-built
        log.debug("Candidate selection failed under <%s>: %s", getattr(root, "name", "?"), exc)
        return []

    out: list[Tag] = []
    for node in nodes:
        n = len(element_text(node))
        if min_length <= n <= max_length:
            out.append(node)
    return out


__all__ = ["TITLE_SELECTORS", "element_text", "find_title_elements"]
