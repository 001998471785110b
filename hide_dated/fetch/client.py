# hide_dated/fetch/client.py
from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import httpx

from hide_dated.config import FetchConfig, settings
from hide_dated.exceptions import PageFetchError

log = logging.getLogger(__name__)

FETCH_ACCEPT = "text/html, */*"

# --------------------------------------------------------------------------------------------------
# Results
# --------------------------------------------------------------------------------------------------


@dataclass
class FetchResult:
    status: int
    url: str
    effective_url: str
    content_type: str | None
    body: bytes | None
    encoding: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300 and self.body is not None

    def text(self) -> str:
        if self.body is None:
            return ""
        return self.body.decode(self.encoding or "utf-8", errors="replace")


# --------------------------------------------------------------------------------------------------
# Client
# --------------------------------------------------------------------------------------------------


class FetcherClient:
    """
    Small wrapper around httpx for pulling a listing page.

    Transport errors and 5xx responses are retried with exponential backoff;
    anything else is returned as-is.
    """

    def __init__(self, config: FetchConfig | None = None) -> None:
        self.config = config or settings.fetch
        self._client = httpx.Client(
            headers={"User-Agent": self.config.user_agent, "Accept": FETCH_ACCEPT},
            timeout=httpx.Timeout(self.config.timeout_s, connect=self.config.connect_timeout_s),
            follow_redirects=self.config.follow_redirects,
        )

    def fetch(self, url: str) -> FetchResult:
        attempt = 0
        while True:
            try:
                resp = self._client.get(url)
            except httpx.RequestError as exc:
                if attempt >= self.config.max_retries:
                    return FetchResult(
                        status=599,
                        url=url,
                        effective_url=url,
                        content_type=None,
                        body=None,
                    )
                log.debug("Fetch error for %s (attempt %d): %s", url, attempt + 1, exc)
                self._sleep_retry(attempt)
                attempt += 1
                continue

            status = int(resp.status_code)
            if status >= 500 and attempt < self.config.max_retries:
                log.debug("Server error %d for %s (attempt %d)", status, url, attempt + 1)
                self._sleep_retry(attempt)
                attempt += 1
                continue

            ok = 200 <= status < 300
            return FetchResult(
                status=status,
                url=url,
                effective_url=str(resp.url),
                content_type=resp.headers.get("Content-Type"),
                body=(resp.content or b"") if ok else None,
                encoding=resp.encoding if ok else None,
            )

    def fetch_html(self, url: str) -> FetchResult:
        """Like fetch(), but raise PageFetchError unless the page came back 2xx."""
        res = self.fetch(url)
        if not res.ok:
            raise PageFetchError(
                f"Could not fetch {url} (status={res.status})",
                status=res.status,
                url=url,
            )
        return res

    def _sleep_retry(self, attempt: int) -> None:
        # tests can monkeypatch time.sleep
        time.sleep(self.config.retry_base_s * (2**attempt))

    # ----------------------------------------------------------------------------------
    # Context manager
    # ----------------------------------------------------------------------------------

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> FetcherClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def fetch_url(url: str) -> FetchResult:
    """
    Convenience wrapper.

    Usage:
        from hide_dated.fetch import fetch_url
        res = fetch_url("https://example.com/tags/python")
    """
    with FetcherClient() as client:
        return client.fetch_html(url)


__all__ = [
    "FetcherClient",
    "FetchResult",
    "fetch_url",
]
