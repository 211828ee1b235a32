"""Pydantic models for the current weather document.

Field names are Pythonic; the wire keys of the JSON document are kept as
aliases.  All models are strict and frozen: a document either validates
completely, with every value already of its declared JSON type, or it does
not produce a record at all.  Unknown keys are ignored.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )


class Coordinate(_WireModel):
    latitude: float = Field(alias="lat")
    longitude: float = Field(alias="lon")


class ConditionEntry(_WireModel):
    """One entry of the ``weather`` array."""

    id: int
    category: str = Field(alias="main")
    description: str
    icon_id: str = Field(alias="icon")


class Measurements(_WireModel):
    temperature: float = Field(alias="temp")
    pressure: int
    humidity: int
    temp_min: float
    temp_max: float


class WindInfo(_WireModel):
    speed: float
    direction_degrees: int = Field(alias="deg")


class CloudCover(_WireModel):
    percentage: int = Field(alias="all")


class StationMeta(_WireModel):
    """Contents of the ``sys`` object."""

    type: int
    id: int
    message: float
    country_code: str = Field(alias="country")
    sunrise: float
    sunset: float


class WeatherRecord(_WireModel):
    """A fully decoded current weather document."""

    coordinate: Coordinate = Field(alias="coord")
    conditions: List[ConditionEntry] = Field(alias="weather")
    base_station: str = Field(alias="base")
    measurements: Measurements = Field(alias="main")
    visibility: int
    wind: WindInfo
    cloud_cover: CloudCover = Field(alias="clouds")
    timestamp: int = Field(alias="dt")
    station_meta: StationMeta = Field(alias="sys")
    location_id: int = Field(alias="id")
    location_name: str = Field(alias="name")
