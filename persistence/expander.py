"""Expansion of a flight's skill requirements into flight assignments."""

from itertools import count
from typing import Iterator, List

from models import Flight, FlightAssignment, Skill


def expand_flight_assignments(
    flight: Flight,
    required_skills: List[Skill],
    id_counter: Iterator[int]
) -> List[FlightAssignment]:
    """
    Create one FlightAssignment per required skill of a flight.

    Args:
        flight: The flight the assignments belong to
        required_skills: Required skills in cell order, duplicates kept
        id_counter: Running id sequence shared across all flights of a read

    Returns:
        Assignments ordered by index_in_flight, starting at 0
    """
    return [
        FlightAssignment(
            id=next(id_counter),
            flight=flight,
            index_in_flight=index,
            required_skill=skill
        )
        for index, skill in enumerate(required_skills)
    ]


def new_id_counter(start: int = 0) -> Iterator[int]:
    """Monotonic id sequence for one entity kind."""
    return count(start)
