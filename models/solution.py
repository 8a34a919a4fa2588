"""Solution data model."""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from models.airport import Airport
from models.crew import Employee, Skill
from models.flight import Flight, FlightAssignment
from models.parametrization import FlightCrewParametrization
from models.score import HardSoftScore


@dataclass
class FlightCrewSolution:
    """
    Complete flight crew scheduling problem, and its solution once solved.

    The solver fills in FlightAssignment.employee and the score; everything
    else is read from the workbook.
    """
    parametrization: FlightCrewParametrization
    skill_list: List[Skill] = field(default_factory=list)
    airport_list: List[Airport] = field(default_factory=list)
    employee_list: List[Employee] = field(default_factory=list)
    flight_list: List[Flight] = field(default_factory=list)
    flight_assignment_list: List[FlightAssignment] = field(default_factory=list)
    score: Optional[HardSoftScore] = None

    @property
    def is_solved(self) -> bool:
        return self.score is not None

    def get_flight_assignments_by_flight(self) -> Dict[Flight, List[FlightAssignment]]:
        """Group assignments per flight, ordered by index in flight."""
        grouped: Dict[Flight, List[FlightAssignment]] = defaultdict(list)
        for assignment in self.flight_assignment_list:
            grouped[assignment.flight].append(assignment)
        for assignments in grouped.values():
            assignments.sort(key=lambda a: a.index_in_flight)
        return dict(grouped)

    def check_integrity(self) -> Dict[str, bool]:
        """
        Verify the cross references of the object graph.

        Returns dict of check_name -> satisfied
        """
        airports = set(self.airport_list)
        skills = set(self.skill_list)
        flights = set(self.flight_list)
        grouped = self.get_flight_assignments_by_flight()

        return {
            "home_airports_known": all(
                e.home_airport in airports for e in self.employee_list
            ),
            "employee_skills_known": all(
                skill in skills
                for e in self.employee_list
                for skill in e.skill_set
            ),
            "flight_airports_known": all(
                f.departure_airport in airports and f.arrival_airport in airports
                for f in self.flight_list
            ),
            "required_skills_known": all(
                a.required_skill in skills for a in self.flight_assignment_list
            ),
            "assignment_flights_known": all(
                a.flight in flights for a in self.flight_assignment_list
            ),
            "indices_contiguous": all(
                [a.index_in_flight for a in assignments] == list(range(len(assignments)))
                for assignments in grouped.values()
            ),
            "assignment_count_matches": len(self.flight_assignment_list) == sum(
                len(grouped.get(f, [])) for f in self.flight_list
            ),
        }

    def print_summary(self) -> None:
        """Print a formatted summary of the solution."""
        print("\n" + "=" * 60)
        print("              FLIGHT CREW SCHEDULING PROBLEM")
        print("=" * 60)
        score = self.score.to_short_string() if self.score else "Not yet solved"
        print(f"Score: {score}")
        print(
            f"Nights away from base fairness weight: "
            f"{self.parametrization.nights_away_from_base_fairness}"
        )
        print(f"Skills: {', '.join(s.name for s in self.skill_list)}")
        print(f"Airports: {', '.join(a.code for a in self.airport_list)}")
        print()

        for employee in self.employee_list:
            print(
                f"  {employee.name} (Home: {employee.home_airport.code}): "
                f"{', '.join(employee.skill_names)}"
            )
        print()

        grouped = self.get_flight_assignments_by_flight()
        for flight in self.flight_list:
            print(
                f"  {flight.flight_number}: {flight.departure_airport.code} -> "
                f"{flight.arrival_airport.code} "
                f"({flight.departure_utc_date_time.strftime('%m/%d %H:%M')}-"
                f"{flight.arrival_utc_date_time.strftime('%H:%M')})"
            )
            for assignment in grouped.get(flight, []):
                employee = assignment.employee.name if assignment.employee else "-"
                print(f"    {assignment.required_skill.name}: {employee}")

        print("=" * 60)

    def __repr__(self) -> str:
        return (
            f"FlightCrewSolution(skills={len(self.skill_list)}, "
            f"airports={len(self.airport_list)}, "
            f"employees={len(self.employee_list)}, "
            f"flights={len(self.flight_list)}, "
            f"assignments={len(self.flight_assignment_list)}, "
            f"score={self.score.to_short_string() if self.score else None})"
        )
