"""Fetch the current weather document and show its wind summary."""

from .adapters import WeatherFetcher, decode_weather, get_weather
from .controller import WeatherController
from .display import LabelBoard
from .presenter import project

__all__ = [
    "WeatherFetcher",
    "decode_weather",
    "get_weather",
    "project",
    "WeatherController",
    "LabelBoard",
]
