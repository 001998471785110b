# hide_dated/exceptions.py
"""
Shared exception classes used by the outer surfaces (CLI, fetcher).

Scanning itself never raises: a structural mismatch or an unparseable title
only means the element stays visible.
"""

from __future__ import annotations


class HideDatedError(Exception):
    """Base class for errors surfaced to the CLI."""

    pass


class DocumentLoadError(HideDatedError):
    """
    Raised when an input document cannot be loaded.

    Examples:
        - File does not exist or is unreadable
        - Body bytes cannot be decoded
    """

    pass


class PageFetchError(HideDatedError):
    """
    Raised when a listing page could not be fetched.

    Examples:
        - Transport errors after all retries
        - Non-2xx final status
    """

    def __init__(self, message: str, *, status: int | None = None, url: str | None = None):
        super().__init__(message)
        self.status = status
        self.url = url


__all__ = [
    "HideDatedError",
    "DocumentLoadError",
    "PageFetchError",
]
