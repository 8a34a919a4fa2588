"""Workbook reader building a FlightCrewSolution."""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from openpyxl import Workbook

from models import (
    Airport,
    Employee,
    Flight,
    FlightAssignment,
    FlightCrewParametrization,
    FlightCrewSolution,
    NIGHTS_AWAY_FROM_BASE_FAIRNESS,
    REQUIRED_SKILL,
    Skill,
)
from persistence import constants as c
from persistence.exceptions import FormatError
from persistence.expander import expand_flight_assignments, new_id_counter
from persistence.registry import ReferenceRegistry
from persistence.xlsx_cursor import XlsxCursor

logger = logging.getLogger(__name__)


def parse_date_time(text: str, position: str) -> datetime:
    """Parse the fixed yyyy-MM-ddTHH:mm cell format."""
    if c.DATE_TIME_PATTERN.fullmatch(text) is None:
        raise FormatError(
            position,
            f"The date time ({text}) must match the pattern (yyyy-MM-ddTHH:mm).",
            value=text
        )
    try:
        return datetime.strptime(text, c.DATE_TIME_FORMAT)
    except ValueError as e:
        raise FormatError(
            position,
            f"The date time ({text}) is not a valid date time: {e}",
            value=text
        ) from e


def split_list_cell(text: Optional[str]) -> List[str]:
    """Split a multi-value cell; a blank cell holds no values."""
    if text is None:
        return []
    return text.split(c.LIST_SEPARATOR)


class FlightCrewXlsxReader:
    """
    Reads the sheets in dependency order.

    Later sheets refer to earlier ones by natural key only, so the skill and
    airport registries must be complete before employees and flights are read.
    One reader instance serves one read.
    """

    def __init__(self, workbook: Workbook):
        self.cursor = XlsxCursor(workbook)
        self.skill_registry: ReferenceRegistry[Skill] = ReferenceRegistry(
            "skill", c.SKILLS_SHEET
        )
        self.airport_registry: ReferenceRegistry[Airport] = ReferenceRegistry(
            "airport", c.AIRPORTS_SHEET
        )

    def read(self) -> FlightCrewSolution:
        solution = FlightCrewSolution(parametrization=self.read_configuration())
        solution.skill_list = self.read_skill_list()
        solution.airport_list = self.read_airport_list()
        self.read_taxi_time_maps(solution.airport_list)
        solution.employee_list = self.read_employee_list()
        solution.flight_list, solution.flight_assignment_list = (
            self.read_flight_list_and_flight_assignment_list()
        )
        logger.info(f"Read {solution!r}")
        return solution

    def _read_headers(self, labels) -> None:
        for label in labels:
            self.cursor.read_header_cell(label)

    def read_configuration(self) -> FlightCrewParametrization:
        cursor = self.cursor
        cursor.open_sheet(c.CONFIGURATION_SHEET)
        cursor.require_row(skip_blank_rows=False)
        self._read_headers(c.CONFIGURATION_HEADERS)

        parametrization = FlightCrewParametrization(id=0)

        def set_fairness(weight: int) -> None:
            parametrization.nights_away_from_base_fairness = weight

        self._read_int_constraint_line(
            NIGHTS_AWAY_FROM_BASE_FAIRNESS,
            set_fairness,
            c.NIGHTS_AWAY_FROM_BASE_FAIRNESS_DESCRIPTION
        )
        self._read_int_constraint_line(
            REQUIRED_SKILL,
            None,
            c.REQUIRED_SKILL_DESCRIPTION
        )
        return parametrization

    def _read_int_constraint_line(
        self,
        name: str,
        setter: Optional[Callable[[int], None]],
        description: str
    ) -> None:
        """
        Read one "name | weight | description" row.

        Constraints without a tunable weight must hold the text n/a.
        """
        cursor = self.cursor
        cursor.require_row()
        cursor.read_header_cell(name)
        if setter is not None:
            setter(cursor.read_integer_cell())
        else:
            value = cursor.next_value()
            if value != c.NOT_APPLICABLE:
                raise FormatError(
                    cursor.current_position(),
                    f"The value ({value!r}) for constraint ({name}) "
                    f"must be {c.NOT_APPLICABLE}.",
                    value=value
                )
        cursor.read_header_cell(description)

    def read_skill_list(self) -> List[Skill]:
        cursor = self.cursor
        cursor.open_sheet(c.SKILLS_SHEET)
        cursor.require_row(skip_blank_rows=False)
        self._read_headers(c.SKILL_HEADERS)

        skill_list: List[Skill] = []
        ids = new_id_counter()
        while cursor.advance_row():
            skill = Skill(id=next(ids), name=cursor.read_string_cell())
            self.skill_registry.register(skill.name, skill, cursor.current_position())
            skill_list.append(skill)
        logger.debug(f"Read {len(skill_list)} skills")
        return skill_list

    def read_airport_list(self) -> List[Airport]:
        cursor = self.cursor
        cursor.open_sheet(c.AIRPORTS_SHEET)
        cursor.require_row(skip_blank_rows=False)
        self._read_headers(c.AIRPORT_HEADERS)

        airport_list: List[Airport] = []
        ids = new_id_counter()
        while cursor.advance_row():
            code = cursor.read_string_cell()
            code_position = cursor.current_position()
            airport = Airport(
                id=next(ids),
                code=code,
                name=cursor.read_string_cell(),
                latitude=float(cursor.read_numeric_cell()),
                longitude=float(cursor.read_numeric_cell())
            )
            self.airport_registry.register(airport.code, airport, code_position)
            airport_list.append(airport)
        logger.debug(f"Read {len(airport_list)} airports")
        return airport_list

    def read_taxi_time_maps(self, airport_list: List[Airport]) -> None:
        """
        Read the square taxi time matrix, rows and columns in airport order.

        A blank cell leaves the pair out of the map.
        """
        cursor = self.cursor
        cursor.open_sheet(c.TAXI_TIME_SHEET)
        cursor.require_row()
        cursor.read_header_cell(c.TAXI_TIME_TITLE)
        cursor.require_row()
        cursor.read_header_cell(c.TAXI_TIME_CORNER_HEADER)
        for airport in airport_list:
            cursor.read_header_cell(airport.code)

        for a in airport_list:
            a.taxi_time_in_minutes_map = {}
            cursor.require_row()
            cursor.read_header_cell(a.code)
            for b in airport_list:
                minutes = cursor.read_optional_numeric_cell()
                if minutes is not None:
                    a.taxi_time_in_minutes_map[b] = int(minutes)

    def read_employee_list(self) -> List[Employee]:
        cursor = self.cursor
        cursor.open_sheet(c.EMPLOYEES_SHEET)
        cursor.require_row(skip_blank_rows=False)
        self._read_headers(c.EMPLOYEE_SPACER_HEADERS)
        cursor.require_row(skip_blank_rows=False)
        self._read_headers(c.EMPLOYEE_HEADERS)

        employee_list: List[Employee] = []
        ids = new_id_counter()
        while cursor.advance_row():
            name = cursor.read_string_cell()
            if c.VALID_NAME_PATTERN.fullmatch(name) is None:
                raise FormatError(
                    cursor.current_position(),
                    f"The employee name ({name}) must match to the regular "
                    f"expression ({c.VALID_NAME_PATTERN.pattern}).",
                    value=name
                )
            home_airport = self.airport_registry.resolve(
                cursor.read_string_cell(),
                cursor.current_position(),
                f"The employee ({name})'s homeAirport"
            )
            skill_set = [
                self.skill_registry.resolve(
                    skill_name,
                    cursor.current_position(),
                    f"The employee ({name})'s skill"
                )
                for skill_name in split_list_cell(cursor.read_optional_string_cell())
            ]
            employee_list.append(Employee(
                id=next(ids),
                name=name,
                home_airport=home_airport,
                skill_set=skill_set
            ))
        logger.debug(f"Read {len(employee_list)} employees")
        return employee_list

    def read_flight_list_and_flight_assignment_list(self):
        cursor = self.cursor
        cursor.open_sheet(c.FLIGHTS_SHEET)
        cursor.require_row(skip_blank_rows=False)
        self._read_headers(c.FLIGHT_HEADERS)

        flight_list: List[Flight] = []
        flight_assignment_list: List[FlightAssignment] = []
        ids = new_id_counter()
        # Not reset per flight
        assignment_ids = new_id_counter()
        while cursor.advance_row():
            flight_number = cursor.read_string_cell()
            departure_airport = self.airport_registry.resolve(
                cursor.read_string_cell(),
                cursor.current_position(),
                f"The flight ({flight_number})'s departureAirport"
            )
            departure = parse_date_time(cursor.read_string_cell(), cursor.current_position())
            arrival_airport = self.airport_registry.resolve(
                cursor.read_string_cell(),
                cursor.current_position(),
                f"The flight ({flight_number})'s arrivalAirport"
            )
            arrival = parse_date_time(cursor.read_string_cell(), cursor.current_position())
            flight = Flight(
                id=next(ids),
                flight_number=flight_number,
                departure_airport=departure_airport,
                departure_utc_date_time=departure,
                arrival_airport=arrival_airport,
                arrival_utc_date_time=arrival
            )
            required_skills = [
                self.skill_registry.resolve(
                    skill_name,
                    cursor.current_position(),
                    f"The flight ({flight_number})'s requiredSkill"
                )
                for skill_name in split_list_cell(cursor.read_optional_string_cell())
            ]
            flight_assignment_list.extend(
                expand_flight_assignments(flight, required_skills, assignment_ids)
            )
            flight_list.append(flight)
        logger.debug(
            f"Read {len(flight_list)} flights with "
            f"{len(flight_assignment_list)} flight assignments"
        )
        return flight_list, flight_assignment_list
