"""Skill and employee data models."""

from dataclasses import dataclass, field
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from models.airport import Airport


@dataclass
class Skill:
    """
    A qualification required on a flight (e.g. "Pilot").

    Attributes:
        id: Sequential identifier, assigned in read order
        name: Unique skill name (natural key)
    """
    id: int
    name: str

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Skill):
            return self.id == other.id
        return False

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Skill({self.id}: {self.name})"


@dataclass
class Employee:
    """
    Represents a crew member.

    Attributes:
        id: Sequential identifier, assigned in read order
        name: Employee name
        home_airport: Airport the employee starts from and returns to
        skill_set: Ordered skills, duplicates collapsed on construction
    """
    id: int
    name: str
    home_airport: 'Airport'
    skill_set: List[Skill] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Keeps first-mention order
        self.skill_set = list(dict.fromkeys(self.skill_set))

    def has_skill(self, skill: Skill) -> bool:
        """Check if employee holds the given skill."""
        return skill in self.skill_set

    @property
    def skill_names(self) -> List[str]:
        return [skill.name for skill in self.skill_set]

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Employee):
            return self.id == other.id
        return False

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Employee({self.id}: {self.name}, Home={self.home_airport.code})"
