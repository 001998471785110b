from __future__ import annotations

import httpx
import pytest
import respx
from httpx import Response

from hide_dated.config import FetchConfig
from hide_dated.exceptions import PageFetchError
from hide_dated.fetch.client import FetcherClient

URL = "https://listing.example/tags/python"


def _config(max_retries: int = 2) -> FetchConfig:
    return FetchConfig(
        user_agent="HideDatedTitles/test",
        timeout_s=5.0,
        connect_timeout_s=5.0,
        max_retries=max_retries,
        retry_base_s=0.5,
        follow_redirects=True,
    )


@pytest.fixture
def slept(monkeypatch) -> list[float]:
    sleeps: list[float] = []
    monkeypatch.setattr("time.sleep", lambda dt: sleeps.append(float(dt)))
    return sleeps


@respx.mock
def test_fetch_ok_returns_body_and_sends_user_agent(slept):
    route = respx.get(URL).mock(
        return_value=Response(200, text="<html>ok</html>", headers={"Content-Type": "text/html"})
    )
    with FetcherClient(_config()) as client:
        res = client.fetch(URL)

    assert res.ok
    assert res.status == 200
    assert res.text() == "<html>ok</html>"
    assert route.calls.last.request.headers["User-Agent"] == "HideDatedTitles/test"
    assert slept == []


@respx.mock
def test_fetch_retries_5xx_with_backoff(slept):
    respx.get(URL).mock(
        side_effect=[
            Response(503),
            Response(502),
            Response(200, text="<html>late</html>"),
        ]
    )
    with FetcherClient(_config()) as client:
        res = client.fetch(URL)

    assert res.status == 200
    assert slept == [0.5, 1.0]


@respx.mock
def test_fetch_gives_up_after_max_retries(slept):
    respx.get(URL).mock(return_value=Response(500))
    with FetcherClient(_config(max_retries=1)) as client:
        res = client.fetch(URL)
        with pytest.raises(PageFetchError) as ei:
            client.fetch_html(URL)

    assert res.status == 500
    assert res.body is None
    assert ei.value.status == 500


@respx.mock
def test_transport_error_becomes_599(slept):
    respx.get(URL).mock(side_effect=httpx.ConnectError("refused"))
    with FetcherClient(_config(max_retries=1)) as client:
        res = client.fetch(URL)

    assert res.status == 599
    assert not res.ok
    assert slept == [0.5]


@respx.mock
def test_4xx_is_not_retried(slept):
    route = respx.get(URL).mock(return_value=Response(404))
    with FetcherClient(_config()) as client:
        res = client.fetch(URL)

    assert res.status == 404
    assert route.call_count == 1
    assert slept == []
