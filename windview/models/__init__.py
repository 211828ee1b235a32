"""Model exports."""

from .display import DisplayProjection
from .weather import (
    CloudCover,
    ConditionEntry,
    Coordinate,
    Measurements,
    StationMeta,
    WeatherRecord,
    WindInfo,
)

__all__ = [
    "WeatherRecord",
    "Coordinate",
    "ConditionEntry",
    "Measurements",
    "WindInfo",
    "CloudCover",
    "StationMeta",
    "DisplayProjection",
]
