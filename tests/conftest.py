"""Pytest fixtures for flight crew workbook tests."""

import pytest
from datetime import datetime
import sys
from pathlib import Path

from openpyxl import Workbook

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import (
    Airport,
    Employee,
    Flight,
    FlightAssignment,
    FlightCrewParametrization,
    FlightCrewSolution,
    Skill,
)
from persistence import constants as c
from data.generators.micro_airline import generate_micro_airline


def build_workbook(sheets):
    """Create a workbook with one sheet per (name, rows) entry, in order."""
    workbook = Workbook()
    workbook.remove(workbook.active)
    for name, rows in sheets.items():
        sheet = workbook.create_sheet(name)
        for row in rows:
            sheet.append(list(row))
    return workbook


@pytest.fixture
def workbook_builder():
    """In-memory workbook from raw sheet rows."""
    return build_workbook


@pytest.fixture
def scenario_sheets():
    """
    Raw sheet rows of the two-airport scenario.

    Pilot and FlightAttendant skills, LHR and JFK with LHR->JFK taxi time
    left blank, one employee and one flight needing both skills.
    """
    return {
        c.CONFIGURATION_SHEET: [
            c.CONFIGURATION_HEADERS,
            ("Nights away from base fairness", 1000, c.NIGHTS_AWAY_FROM_BASE_FAIRNESS_DESCRIPTION),
            (),
            ("Required skill", "n/a", c.REQUIRED_SKILL_DESCRIPTION),
        ],
        c.SKILLS_SHEET: [
            ("Name",),
            ("Pilot",),
            ("FlightAttendant",),
        ],
        c.AIRPORTS_SHEET: [
            c.AIRPORT_HEADERS,
            ("LHR", "London Heathrow", 51.47, -0.4543),
            ("JFK", "New York JFK", 40.6413, -73.7781),
        ],
        c.TAXI_TIME_SHEET: [
            (c.TAXI_TIME_TITLE,),
            ("Airport code", "LHR", "JFK"),
            ("LHR", 0, None),
            ("JFK", None, 0),
        ],
        c.EMPLOYEES_SHEET: [
            (None, None, None),
            c.EMPLOYEE_HEADERS,
            ("Ann", "LHR", "Pilot, FlightAttendant"),
        ],
        c.FLIGHTS_SHEET: [
            c.FLIGHT_HEADERS,
            ("FL1", "LHR", "2024-01-01T08:00", "JFK", "2024-01-01T16:00", "Pilot, FlightAttendant"),
        ],
    }


@pytest.fixture
def save_sheets(tmp_path):
    """Save raw sheet rows as an .xlsx file and return its path."""
    def _save(sheets, name="input.xlsx"):
        path = tmp_path / name
        build_workbook(sheets).save(path)
        return path
    return _save


@pytest.fixture
def simple_solution():
    """Scenario solution built directly from model objects."""
    pilot = Skill(id=0, name="Pilot")
    attendant = Skill(id=1, name="FlightAttendant")
    lhr = Airport(id=0, code="LHR", name="London Heathrow", latitude=51.47, longitude=-0.4543)
    jfk = Airport(id=1, code="JFK", name="New York JFK", latitude=40.6413, longitude=-73.7781)
    lhr.taxi_time_in_minutes_map = {lhr: 0}
    jfk.taxi_time_in_minutes_map = {jfk: 0}
    ann = Employee(id=0, name="Ann", home_airport=lhr, skill_set=[pilot, attendant])
    flight = Flight(
        id=0,
        flight_number="FL1",
        departure_airport=lhr,
        departure_utc_date_time=datetime(2024, 1, 1, 8, 0),
        arrival_airport=jfk,
        arrival_utc_date_time=datetime(2024, 1, 1, 16, 0)
    )
    assignments = [
        FlightAssignment(id=0, flight=flight, index_in_flight=0, required_skill=pilot),
        FlightAssignment(id=1, flight=flight, index_in_flight=1, required_skill=attendant),
    ]
    return FlightCrewSolution(
        parametrization=FlightCrewParametrization(id=0, nights_away_from_base_fairness=1000),
        skill_list=[pilot, attendant],
        airport_list=[lhr, jfk],
        employee_list=[ann],
        flight_list=[flight],
        flight_assignment_list=assignments
    )


@pytest.fixture
def micro_airline():
    """Full micro-airline sample instance."""
    return generate_micro_airline()
