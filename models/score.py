"""Score and constraint match models produced by the solver."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List


@dataclass(frozen=True, order=True)
class HardSoftScore:
    """
    Two-level score: hard constraints first, then soft constraints.

    Ordered naturally by (hard, soft), so a worse score sorts first.
    """
    hard: int = 0
    soft: int = 0

    def add(self, other: 'HardSoftScore') -> 'HardSoftScore':
        return HardSoftScore(self.hard + other.hard, self.soft + other.soft)

    def to_short_string(self) -> str:
        """Render only the non-zero levels, or "0" if both are zero."""
        parts = []
        if self.hard != 0:
            parts.append(f"{self.hard}hard")
        if self.soft != 0:
            parts.append(f"{self.soft}soft")
        return "/".join(parts) if parts else "0"

    def __str__(self) -> str:
        return f"{self.hard}hard/{self.soft}soft"


class JustificationKind(Enum):
    """What kind of object justifies a constraint match."""
    FLIGHT_ASSIGNMENT = "flight_assignment"
    EMPLOYEE = "employee"
    OTHER = "other"


@dataclass(frozen=True)
class Justification:
    """
    Tagged justification payload.

    The kind tells consumers how to interpret value without inspecting
    its type.
    """
    kind: JustificationKind
    value: Any

    @classmethod
    def of_flight_assignment(cls, flight_assignment: Any) -> 'Justification':
        return cls(JustificationKind.FLIGHT_ASSIGNMENT, flight_assignment)

    @classmethod
    def of_employee(cls, employee: Any) -> 'Justification':
        return cls(JustificationKind.EMPLOYEE, employee)

    @classmethod
    def of_other(cls, value: Any) -> 'Justification':
        return cls(JustificationKind.OTHER, value)


@dataclass
class ConstraintMatch:
    """A single constraint violation or reward."""
    score: HardSoftScore
    justification_list: List[Justification] = field(default_factory=list)


@dataclass
class ConstraintMatchTotal:
    """All matches of one constraint and their summed score."""
    constraint_name: str
    score: HardSoftScore
    constraint_match_set: List[ConstraintMatch] = field(default_factory=list)

    @classmethod
    def from_matches(
        cls,
        constraint_name: str,
        matches: List[ConstraintMatch]
    ) -> 'ConstraintMatchTotal':
        """Build a total whose score is the sum of its match scores."""
        total = HardSoftScore()
        for match in matches:
            total = total.add(match.score)
        return cls(constraint_name, total, list(matches))
