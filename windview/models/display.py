"""Display strings derived from a weather record."""

from pydantic import BaseModel, ConfigDict


class DisplayProjection(BaseModel):
    """The four label texts shown for a weather record.

    ``wind_speed`` carries no unit; the display appends it.
    """

    model_config = ConfigDict(frozen=True)

    coordinate: str
    wind_speed: str
    wind_direction: str
    location: str
