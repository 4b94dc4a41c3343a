"""Domain models for trip waypoints and delivery shape."""

from dataclasses import dataclass
from enum import Enum


class TripShape(str, Enum):
    """Whether a trip ends at one drop or runs through several stops."""

    SINGLE = "single"
    MULTIPLE = "multiple"


@dataclass(frozen=True, slots=True)
class Waypoint:
    """A geographic coordinate in decimal degrees."""

    latitude: float
    longitude: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)
