"""Orchestration of one fetch, decode and publish cycle."""

from __future__ import annotations

from typing import Optional

from windview.adapters.weather import WeatherFetcher, get_weather
from windview.config import STUB_DATA_URL
from windview.display import DisplaySink
from windview.errors import WeatherPipelineError
from windview.middleware.logging import log_error, log_info, log_warning
from windview.models import DisplayProjection, WeatherRecord
from windview.presenter import project


class WeatherController:
    """Owns the current weather record and keeps the display in step with it.

    Assigning :attr:`record` recomputes the projection and publishes it to
    the sink immediately.  :meth:`run` performs a full pipeline run and is
    the boundary where stage errors are caught: a failed run is logged,
    remembered in :attr:`last_error` and otherwise dropped.
    """

    def __init__(
        self,
        sink: DisplaySink,
        fetcher: Optional[WeatherFetcher] = None,
        url: str = STUB_DATA_URL,
    ) -> None:
        self.sink = sink
        self.fetcher = fetcher or WeatherFetcher()
        self.url = url
        self.last_error: Optional[WeatherPipelineError] = None
        self._record: Optional[WeatherRecord] = None
        self._projection: Optional[DisplayProjection] = None
        self._in_flight = False

    @property
    def record(self) -> Optional[WeatherRecord]:
        return self._record

    @record.setter
    def record(self, value: Optional[WeatherRecord]) -> None:
        if value is None:
            return
        self._record = value
        self._projection = project(value)
        self.sink.publish(self._projection)

    @property
    def projection(self) -> Optional[DisplayProjection]:
        return self._projection

    @property
    def is_running(self) -> bool:
        return self._in_flight

    async def run(self) -> Optional[DisplayProjection]:
        """Fetch, decode and publish; return the new projection or ``None``."""
        if self._in_flight:
            log_warning("weather_pipeline_busy", url=self.url)
            return None

        self._in_flight = True
        log_info("weather_pipeline_start", url=self.url)
        try:
            record = await get_weather(self.url, fetcher=self.fetcher)
        except WeatherPipelineError as e:
            self.last_error = e
            log_error(
                "weather_pipeline_failed",
                url=self.url,
                stage=e.stage,
                error_type=type(e).__name__,
                error=str(e),
            )
            return None
        finally:
            self._in_flight = False

        self.last_error = None
        self.record = record
        log_info(
            "weather_pipeline_published",
            location=record.location_name,
            timestamp=record.timestamp,
        )
        return self._projection
