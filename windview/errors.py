"""Exceptions raised by the weather pipeline stages.

Every stage raises a subclass of :class:`WeatherPipelineError`.  The
controller is the only place that catches them; callers of the individual
stages see the exception directly.
"""

from __future__ import annotations

from typing import Any, Optional


class WeatherPipelineError(RuntimeError):
    """Base error for a failed pipeline run."""

    stage = "pipeline"


class FetchError(WeatherPipelineError):
    """The weather document could not be retrieved."""

    stage = "fetch"

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class URLConstructionError(FetchError):
    """The configured URL is not an absolute http(s) URL."""


class TransportError(FetchError):
    """Network failure or an HTTP error status."""

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, cause)
        self.status_code = status_code


class EmptyResponseError(FetchError):
    """The server answered without a body."""


class DecodeError(WeatherPipelineError):
    """The body is not a valid weather document.

    ``path`` is the first offending location in wire notation
    (``"wind.speed"``), or ``"<root>"`` when the document itself is
    unusable.  ``errors`` keeps every problem the validator reported.
    """

    stage = "decode"

    def __init__(
        self,
        message: str,
        path: str = "<root>",
        errors: Optional[list[dict[str, Any]]] = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.errors = errors or []


__all__ = [
    "WeatherPipelineError",
    "FetchError",
    "URLConstructionError",
    "TransportError",
    "EmptyResponseError",
    "DecodeError",
]
