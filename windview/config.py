"""Static configuration for the windview service."""

from typing import Optional

SERVICE_NAME = "windview"

# Stub document describing the current weather in London.
STUB_DATA_URL = (
    "https://raw.githubusercontent.com/cjbatin/Swift4-Decoding-JSON-Using-Codable/"
    "master/WeatherForecast/StubData/londonWeather.json"
)

# Appended to the wind speed label when it is displayed.
WIND_SPEED_UNIT = " m/s"

# Seconds; None disables the httpx timeout.
FETCH_TIMEOUT: Optional[float] = None
