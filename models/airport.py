"""Airport data model."""

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class Airport:
    """
    Represents an airport.

    Attributes:
        id: Sequential identifier, assigned in read order
        code: IATA code (natural key, e.g. "LHR")
        name: Human-readable airport name
        latitude: Latitude in degrees
        longitude: Longitude in degrees
        taxi_time_in_minutes_map: Taxi time to nearby airports. Sparse:
            a missing key means no known route, unlike an entry of 0.
    """
    id: int
    code: str
    name: str
    latitude: float
    longitude: float
    taxi_time_in_minutes_map: Dict['Airport', int] = field(default_factory=dict)

    def get_taxi_time_in_minutes_to(self, other: 'Airport') -> Optional[int]:
        """Taxi time to another airport, or None if there is no entry."""
        return self.taxi_time_in_minutes_map.get(other)

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Airport):
            return self.id == other.id
        return False

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Airport({self.id}: {self.code}, {self.name})"
