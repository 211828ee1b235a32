"""Adapter for retrieving and decoding the current weather document.

The fetch stage returns the raw body and the decode stage turns it into a
:class:`~windview.models.weather.WeatherRecord`.  Both stages raise the
errors from :mod:`windview.errors`; neither retries nor caches.
"""

from __future__ import annotations

from typing import Optional, Union

import httpx
from pydantic import ValidationError

from windview.config import FETCH_TIMEOUT, STUB_DATA_URL
from windview.errors import (
    DecodeError,
    EmptyResponseError,
    TransportError,
    URLConstructionError,
)
from windview.middleware.logging import log_error, log_info, log_warning
from windview.models.weather import WeatherRecord


class WeatherFetcher:
    """Single-shot GET of a weather document.

    ``transport`` is handed to :class:`httpx.AsyncClient` unchanged, which
    lets tests substitute :class:`httpx.MockTransport`.
    """

    def __init__(
        self,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = FETCH_TIMEOUT,
    ) -> None:
        self.transport = transport
        self.timeout = timeout

    async def fetch(self, url: str) -> bytes:
        """Return the full response body for ``url``."""
        target = _parse_url(url)

        log_info("weather_fetch_request", url=str(target))
        try:
            async with httpx.AsyncClient(
                transport=self.transport,
                timeout=self.timeout,
                follow_redirects=True,
            ) as client:
                resp = await client.get(target)
        except httpx.HTTPError as e:
            log_error("weather_fetch_transport_error", url=str(target), error=str(e))
            raise TransportError(f"request to {target} failed: {e}", cause=e) from e

        if resp.status_code >= 400:
            log_warning(
                "weather_fetch_response_status",
                url=str(target),
                status_code=resp.status_code,
            )
            raise TransportError(
                f"{target} answered HTTP {resp.status_code}",
                status_code=resp.status_code,
            )

        body = resp.content
        if not body:
            log_warning("weather_fetch_empty_body", url=str(target))
            raise EmptyResponseError(f"{target} returned an empty body")

        log_info("weather_fetch_done", url=str(target), num_bytes=len(body))
        return body


def _parse_url(url: str) -> httpx.URL:
    """Parse ``url`` and require an absolute http(s) URL with a host."""
    try:
        parsed = httpx.URL(url)
        # .host decodes IDNA lazily and raises UnicodeError on bad punycode.
        absolute = parsed.scheme in ("http", "https") and bool(parsed.host)
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        log_error("weather_fetch_bad_url", url=url, error=str(e))
        raise URLConstructionError(f"cannot build a URL from {url!r}", cause=e) from e
    if not absolute:
        log_error("weather_fetch_bad_url", url=url, error="not an absolute http(s) URL")
        raise URLConstructionError(f"cannot build a URL from {url!r}")
    return parsed


def _wire_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


def decode_weather(data: Union[bytes, str]) -> WeatherRecord:
    """Decode a JSON weather document.

    Raises :class:`DecodeError` naming the first offending field when the
    document is malformed, incomplete or carries a value of the wrong type.
    """
    try:
        return WeatherRecord.model_validate_json(data)
    except ValidationError as exc:
        problems = [
            {"path": _wire_path(err["loc"]), "type": err["type"], "msg": err["msg"]}
            for err in exc.errors(include_url=False)
        ]
        first = problems[0] if problems else {"path": "<root>", "msg": str(exc)}
        log_error(
            "weather_decode_failed",
            path=first["path"],
            error_count=len(problems),
            errors=problems,
        )
        raise DecodeError(
            f"invalid weather document at {first['path']}: {first['msg']}",
            path=first["path"],
            errors=problems,
        ) from exc


async def get_weather(
    url: str = STUB_DATA_URL, fetcher: Optional[WeatherFetcher] = None
) -> WeatherRecord:
    """Fetch and decode the weather document at ``url``."""
    fetcher = fetcher or WeatherFetcher()
    data = await fetcher.fetch(url)
    return decode_weather(data)
