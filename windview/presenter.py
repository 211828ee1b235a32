"""Projection of a weather record onto its display strings."""

from windview.models import DisplayProjection, WeatherRecord


def project(record: WeatherRecord) -> DisplayProjection:
    """Build the four label texts for ``record``.

    Numbers keep Python's default string form, so ``51.51`` renders as
    ``"51.51"`` and ``280`` as ``"280"``.
    """
    return DisplayProjection(
        coordinate=f"Lat: {record.coordinate.latitude}, Lon: {record.coordinate.longitude}",
        wind_speed=f"Wind Speed: {record.wind.speed}",
        wind_direction=f"Wind Deg: {record.wind.direction_degrees}",
        location=f"Location: {record.location_name}",
    )
