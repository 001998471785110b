# hide_dated/scan/containers.py
from __future__ import annotations

import logging
from typing import Any

from bs4 import BeautifulSoup, Tag

log = logging.getLogger(__name__)

# Most specific first: an <article> card, then a list entry, then whatever
# directly wraps the link.
CONTAINER_TAGS: tuple[str, ...] = ("article", "li")

HIDDEN_DECLARATION = "display: none"


def _parent_element(el: Any) -> Tag | None:
    parent = getattr(el, "parent", None)
    # The BeautifulSoup object is the document, not an element.
    if parent is None or isinstance(parent, BeautifulSoup) or not isinstance(parent, Tag):
        return None
    return parent


def find_container(title_el: Any) -> Tag | None:
    """Resolve the listing item that encloses a title element, or None."""
    if title_el is None:
        return None

    for name in CONTAINER_TAGS:
        found = title_el.find_parent(name)
        if found is not None:
            return found

    return _parent_element(title_el)


def _parse_style(style: str) -> list[tuple[str, str]]:
    decls: list[tuple[str, str]] = []
    for chunk in (style or "").split(";"):
        if ":" not in chunk:
            continue
        prop, _, value = chunk.partition(":")
        prop = prop.strip().lower()
        if prop:
            decls.append((prop, value.strip()))
    return decls


def is_hidden(el: Any) -> bool:
    if not isinstance(el, Tag):
        return False
    for prop, value in _parse_style(el.get("style", "")):
        if prop == "display" and value.lower().replace("!important", "").strip() == "none":
            return True
    return False


def hide(el: Any) -> bool:
    """
    Set display:none on `el`, keeping its other inline declarations.

    Returns False when nothing changed (already hidden or not an element).
    """
    if not isinstance(el, Tag):
        return False
    if is_hidden(el):
        return False

    decls = [(p, v) for p, v in _parse_style(el.get("style", "")) if p != "display"]
    parts = [f"{p}: {v}" for p, v in decls]
    parts.append(HIDDEN_DECLARATION)
    el["style"] = "; ".join(parts) + ";"
    log.debug("Hid <%s> container", el.name)
    return True


__all__ = ["CONTAINER_TAGS", "find_container", "hide", "is_hidden"]
