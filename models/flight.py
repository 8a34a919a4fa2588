"""Flight and flight assignment data models."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from models.airport import Airport
    from models.crew import Employee, Skill


@dataclass
class Flight:
    """
    Represents a single flight leg.

    Attributes:
        id: Sequential identifier, assigned in read order
        flight_number: Airline flight number (e.g., "FL1")
        departure_airport: Departure airport
        departure_utc_date_time: Scheduled departure time (UTC)
        arrival_airport: Arrival airport
        arrival_utc_date_time: Scheduled arrival time (UTC)
    """
    id: int
    flight_number: str
    departure_airport: 'Airport'
    departure_utc_date_time: datetime
    arrival_airport: 'Airport'
    arrival_utc_date_time: datetime

    @property
    def departure_utc_date(self) -> date:
        return self.departure_utc_date_time.date()

    @property
    def duration(self) -> timedelta:
        """Flight duration."""
        return self.arrival_utc_date_time - self.departure_utc_date_time

    @property
    def duration_hours(self) -> float:
        """Flight duration in hours."""
        return self.duration.total_seconds() / 3600

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Flight):
            return self.id == other.id
        return False

    def __str__(self) -> str:
        return f"{self.flight_number}@{self.departure_utc_date.isoformat()}"

    def __repr__(self) -> str:
        return (
            f"Flight({self.id}: {self.flight_number} "
            f"{self.departure_airport.code}→{self.arrival_airport.code} "
            f"{self.departure_utc_date_time.strftime('%m/%d %H:%M')}-"
            f"{self.arrival_utc_date_time.strftime('%H:%M')})"
        )


@dataclass
class FlightAssignment:
    """
    One crew seat on a flight, requiring a single skill.

    Derived from the flight's skill requirement list: the n-th required skill
    becomes the assignment with index_in_flight n. The employee is filled in
    by the solver.
    """
    id: int
    flight: Flight
    index_in_flight: int
    required_skill: 'Skill'
    employee: Optional['Employee'] = None

    @property
    def is_assigned(self) -> bool:
        return self.employee is not None

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FlightAssignment):
            return self.id == other.id
        return False

    def __str__(self) -> str:
        return f"{self.flight}-{self.index_in_flight}"

    def __repr__(self) -> str:
        employee = self.employee.name if self.employee else None
        return (
            f"FlightAssignment({self.id}: {self.flight}#{self.index_in_flight} "
            f"{self.required_skill.name}, employee={employee})"
        )
