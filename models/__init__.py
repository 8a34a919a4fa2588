"""Core data models for flight crew scheduling."""

from models.airport import Airport
from models.crew import Skill, Employee
from models.flight import Flight, FlightAssignment
from models.parametrization import (
    FlightCrewParametrization,
    NIGHTS_AWAY_FROM_BASE_FAIRNESS,
    REQUIRED_SKILL,
)
from models.score import (
    HardSoftScore,
    ConstraintMatch,
    ConstraintMatchTotal,
    Justification,
    JustificationKind,
)
from models.solution import FlightCrewSolution

__all__ = [
    "Airport",
    "Skill",
    "Employee",
    "Flight",
    "FlightAssignment",
    "FlightCrewParametrization",
    "NIGHTS_AWAY_FROM_BASE_FAIRNESS",
    "REQUIRED_SKILL",
    "HardSoftScore",
    "ConstraintMatch",
    "ConstraintMatchTotal",
    "Justification",
    "JustificationKind",
    "FlightCrewSolution",
]
