"""Micro-Airline sample dataset generator.

Creates a 3-airport, 4-employee, 6-flight flight crew scheduling problem.
Small enough to inspect by hand in the written workbook.
"""

from datetime import datetime
from itertools import count
from typing import Dict, List

from models import (
    Airport,
    Employee,
    Flight,
    FlightAssignment,
    FlightCrewParametrization,
    FlightCrewSolution,
    Skill,
)


def generate_micro_airline() -> FlightCrewSolution:
    """
    Generate the Micro-Airline sample instance.

    Dataset Details:
        - 2 skills (Pilot, Flight attendant)
        - 3 airports; LHR and LGW are taxi-connected, JFK is not
        - 4 employees, 3 based at LHR and 1 at JFK
        - 6 flights over 2 days, each requiring 1 pilot and 1-2 attendants
    """
    pilot = Skill(id=0, name="Pilot")
    attendant = Skill(id=1, name="Flight attendant")
    skills = [pilot, attendant]

    lhr = Airport(id=0, code="LHR", name="London Heathrow", latitude=51.4700, longitude=-0.4543)
    lgw = Airport(id=1, code="LGW", name="London Gatwick", latitude=51.1537, longitude=-0.1821)
    jfk = Airport(id=2, code="JFK", name="New York JFK", latitude=40.6413, longitude=-73.7781)
    airports = [lhr, lgw, jfk]

    # Sparse: only nearby airports have taxi times
    lhr.taxi_time_in_minutes_map = {lhr: 0, lgw: 75}
    lgw.taxi_time_in_minutes_map = {lhr: 75, lgw: 0}
    jfk.taxi_time_in_minutes_map = {jfk: 0}

    employees = [
        Employee(id=0, name="Ann Carter", home_airport=lhr, skill_set=[pilot]),
        Employee(id=1, name="Bob O'Neil", home_airport=lhr, skill_set=[pilot, attendant]),
        Employee(id=2, name="Chloe Smith", home_airport=lgw, skill_set=[attendant]),
        Employee(id=3, name="Dan Reyes", home_airport=jfk, skill_set=[pilot]),
    ]

    day1 = datetime(2024, 1, 1)
    day2 = datetime(2024, 1, 2)
    schedule = [
        # (number, from, departure, to, arrival, required skills)
        ("FL100", lhr, day1.replace(hour=8), jfk, day1.replace(hour=16), [pilot, attendant, attendant]),
        ("FL101", jfk, day2.replace(hour=9), lhr, day2.replace(hour=17), [pilot, attendant, attendant]),
        ("FL200", lgw, day1.replace(hour=7, minute=30), lhr, day1.replace(hour=8, minute=15), [pilot, attendant]),
        ("FL201", lhr, day1.replace(hour=18), lgw, day1.replace(hour=18, minute=45), [pilot, attendant]),
        ("FL300", jfk, day1.replace(hour=12), lgw, day1.replace(hour=20), [pilot, attendant]),
        ("FL301", lgw, day2.replace(hour=10), jfk, day2.replace(hour=18), [pilot, attendant]),
    ]

    flights: List[Flight] = []
    flight_assignments: List[FlightAssignment] = []
    assignment_ids = count()
    for flight_id, (number, origin, departure, destination, arrival, required) in enumerate(schedule):
        flight = Flight(
            id=flight_id,
            flight_number=number,
            departure_airport=origin,
            departure_utc_date_time=departure,
            arrival_airport=destination,
            arrival_utc_date_time=arrival
        )
        flights.append(flight)
        for index, skill in enumerate(required):
            flight_assignments.append(FlightAssignment(
                id=next(assignment_ids),
                flight=flight,
                index_in_flight=index,
                required_skill=skill
            ))

    return FlightCrewSolution(
        parametrization=FlightCrewParametrization(id=0, nights_away_from_base_fairness=1000),
        skill_list=skills,
        airport_list=airports,
        employee_list=employees,
        flight_list=flights,
        flight_assignment_list=flight_assignments
    )


def print_instance_summary(solution: FlightCrewSolution) -> None:
    """Print a summary of the instance."""
    print("\n" + "=" * 60)
    print("           MICRO-AIRLINE SAMPLE INSTANCE")
    print("=" * 60)

    print("\nAIRPORTS:")
    print("-" * 60)
    print(f"{'Code':<5} {'Name':<20} {'Lat':>9} {'Lon':>9}  Taxi")
    print("-" * 60)
    for a in solution.airport_list:
        taxi: Dict[str, int] = {
            b.code: minutes for b, minutes in a.taxi_time_in_minutes_map.items()
        }
        print(
            f"{a.code:<5} {a.name:<20} {a.latitude:>9.4f} {a.longitude:>9.4f}  {taxi}"
        )

    print("\nFLIGHTS:")
    print("-" * 60)
    print(f"{'Number':<7} {'From':<4} {'To':<4} {'Departure':<16} {'Arrival':<16} {'Crew':>4}")
    print("-" * 60)
    grouped = solution.get_flight_assignments_by_flight()
    for f in sorted(solution.flight_list, key=lambda x: (x.departure_utc_date_time, x.id)):
        print(
            f"{f.flight_number:<7} {f.departure_airport.code:<4} {f.arrival_airport.code:<4} "
            f"{f.departure_utc_date_time.strftime('%m/%d %H:%M'):<16} "
            f"{f.arrival_utc_date_time.strftime('%m/%d %H:%M'):<16} "
            f"{len(grouped.get(f, [])):>4}"
        )

    print("\nEMPLOYEES:")
    print("-" * 60)
    print(f"{'Name':<16} {'Home':<5} Skills")
    print("-" * 60)
    for e in solution.employee_list:
        print(f"{e.name:<16} {e.home_airport.code:<5} {', '.join(e.skill_names)}")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    # Generate and print the instance
    print_instance_summary(generate_micro_airline())
