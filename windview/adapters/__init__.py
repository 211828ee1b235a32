"""Adapter exports."""

from .weather import WeatherFetcher, decode_weather, get_weather

__all__ = ["WeatherFetcher", "decode_weather", "get_weather"]
