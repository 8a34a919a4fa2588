"""Constraint weight parametrization model."""

from dataclasses import dataclass

REQUIRED_SKILL = "Required skill"
NIGHTS_AWAY_FROM_BASE_FAIRNESS = "Nights away from base fairness"


@dataclass
class FlightCrewParametrization:
    """
    Tunable constraint weights for flight crew scheduling.

    There is a single instance per solution, so its id is fixed.
    """
    id: int = 0

    # Soft weight
    nights_away_from_base_fairness: int = 1000
