from __future__ import annotations

import asyncio

import httpx
import pytest

from windview.adapters.weather import get_weather
from windview.config import STUB_DATA_URL
from windview.errors import (
    DecodeError,
    EmptyResponseError,
    FetchError,
    TransportError,
    URLConstructionError,
)


def test_fetch_returns_body(make_fetcher, london_bytes):
    fetcher, recorder = make_fetcher(httpx.Response(200, content=london_bytes))

    body = asyncio.run(fetcher.fetch(STUB_DATA_URL))

    assert body == london_bytes
    assert len(recorder.requests) == 1
    assert recorder.requests[0].method == "GET"
    assert str(recorder.requests[0].url) == STUB_DATA_URL


@pytest.mark.parametrize(
    "url",
    [
        "",
        "not a url",
        "londonWeather.json",
        "ftp://example.com/x.json",
        "https://",
        "https://xn--/x",
    ],
)
def test_malformed_url_is_rejected_before_any_request(make_fetcher, url):
    fetcher, recorder = make_fetcher(httpx.Response(200, content=b"{}"))

    with pytest.raises(URLConstructionError) as info:
        asyncio.run(fetcher.fetch(url))

    assert info.value.stage == "fetch"
    assert recorder.requests == []


def test_transport_failure(make_fetcher):
    fetcher, _ = make_fetcher(httpx.ConnectError("connection refused"))

    with pytest.raises(TransportError) as info:
        asyncio.run(fetcher.fetch("https://weather.test/london.json"))

    assert isinstance(info.value.cause, httpx.ConnectError)
    assert info.value.status_code is None


def test_error_status_is_a_transport_error(make_fetcher):
    fetcher, _ = make_fetcher(httpx.Response(404, content=b"404: Not Found"))

    with pytest.raises(TransportError) as info:
        asyncio.run(fetcher.fetch("https://weather.test/missing.json"))

    assert info.value.status_code == 404


def test_empty_body(make_fetcher):
    fetcher, _ = make_fetcher(httpx.Response(200, content=b""))

    with pytest.raises(EmptyResponseError) as info:
        asyncio.run(fetcher.fetch("https://weather.test/london.json"))

    assert isinstance(info.value, FetchError)


def test_redirect_is_followed(make_fetcher, london_bytes):
    fetcher, recorder = make_fetcher(
        httpx.Response(302, headers={"location": "https://weather.test/london.json"}),
        httpx.Response(200, content=london_bytes),
    )

    body = asyncio.run(fetcher.fetch("https://weather.test/old/london.json"))

    assert body == london_bytes
    assert [str(r.url) for r in recorder.requests] == [
        "https://weather.test/old/london.json",
        "https://weather.test/london.json",
    ]


def test_get_weather_fetches_and_decodes(make_fetcher, london_bytes):
    fetcher, _ = make_fetcher(httpx.Response(200, content=london_bytes))

    record = asyncio.run(get_weather("https://weather.test/london.json", fetcher=fetcher))

    assert record.location_name == "London"


def test_get_weather_surfaces_decode_errors(make_fetcher):
    fetcher, _ = make_fetcher(httpx.Response(200, content=b"not json"))

    with pytest.raises(DecodeError):
        asyncio.run(get_weather("https://weather.test/london.json", fetcher=fetcher))
