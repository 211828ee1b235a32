"""Display sinks that receive projections from the controller."""

from __future__ import annotations

from typing import Dict, Optional, Protocol

from windview.config import WIND_SPEED_UNIT
from windview.models import DisplayProjection


# Top-to-bottom order of the labels on screen.
LABEL_ORDER = ("location", "wind_speed", "wind_direction", "coordinate")


class DisplaySink(Protocol):
    """Anything that can show a projection."""

    def publish(self, projection: DisplayProjection) -> None:
        ...


class LabelBoard:
    """Four label slots replaced together on every publish."""

    def __init__(self) -> None:
        self._projection: Optional[DisplayProjection] = None
        self.publish_count = 0

    def publish(self, projection: DisplayProjection) -> None:
        self._projection = projection
        self.publish_count += 1

    @property
    def projection(self) -> Optional[DisplayProjection]:
        return self._projection

    def labels(self) -> Optional[Dict[str, str]]:
        """Return the label texts as displayed, or ``None`` before the first publish."""
        p = self._projection
        if p is None:
            return None
        return {
            "location": p.location,
            "wind_speed": p.wind_speed + WIND_SPEED_UNIT,
            "wind_direction": p.wind_direction,
            "coordinate": p.coordinate,
        }
