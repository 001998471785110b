# hide_dated/fetch/__init__.py
"""
Tiny fetcher package: an httpx client for pulling a live listing page into
the filter.

Public API:
  - fetch_url(url: str) -> FetchResult (raises PageFetchError unless 2xx)
  - FetcherClient, FetchResult
"""

from .client import FetcherClient, FetchResult, fetch_url

__all__ = ["FetcherClient", "FetchResult", "fetch_url"]
