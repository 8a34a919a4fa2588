"""Workbook writer projecting a FlightCrewSolution into sheets."""

import logging
from typing import Iterable, Optional

from openpyxl import Workbook

from models import (
    FlightCrewSolution,
    ConstraintMatchTotal,
    NIGHTS_AWAY_FROM_BASE_FAIRNESS,
    REQUIRED_SKILL,
)
from persistence import constants as c
from persistence.report import ScoreViewRenderer
from persistence.settings import XlsxSettings
from persistence.xlsx_cursor import XlsxSheetWriter

logger = logging.getLogger(__name__)


class FlightCrewXlsxWriter:
    """
    Mirror of FlightCrewXlsxReader.

    Writes the exact header labels the reader verifies and follows object
    references directly; nothing is looked up by natural key.
    """

    def __init__(
        self,
        solution: FlightCrewSolution,
        constraint_match_totals: Iterable[ConstraintMatchTotal] = (),
        settings: Optional[XlsxSettings] = None
    ):
        self.solution = solution
        self.constraint_match_totals = list(constraint_match_totals)
        self.settings = settings or XlsxSettings()
        self.cursor = XlsxSheetWriter(self.settings)

    def write(self) -> Workbook:
        self.write_configuration()
        self.write_skill_list()
        self.write_airport_list()
        self.write_taxi_time_maps()
        self.write_employee_list()
        self.write_flight_list_and_flight_assignment_list()
        ScoreViewRenderer(self.cursor).render(
            self.solution.score, self.constraint_match_totals
        )
        logger.info(f"Wrote {self.solution!r}")
        return self.cursor.workbook

    def _write_headers(self, labels) -> None:
        for label in labels:
            self.cursor.next_header_cell(label)

    def write_configuration(self) -> None:
        cursor = self.cursor
        cursor.next_sheet(c.CONFIGURATION_SHEET, 1, 1)
        cursor.next_row()
        self._write_headers(c.CONFIGURATION_HEADERS)
        parametrization = self.solution.parametrization

        self._write_int_constraint_line(
            NIGHTS_AWAY_FROM_BASE_FAIRNESS,
            parametrization.nights_away_from_base_fairness,
            c.NIGHTS_AWAY_FROM_BASE_FAIRNESS_DESCRIPTION
        )
        cursor.next_row()
        self._write_int_constraint_line(
            REQUIRED_SKILL,
            None,
            c.REQUIRED_SKILL_DESCRIPTION
        )
        cursor.auto_size_columns()

    def _write_int_constraint_line(
        self,
        name: str,
        weight: Optional[int],
        description: str
    ) -> None:
        cursor = self.cursor
        cursor.next_row()
        cursor.next_header_cell(name)
        cursor.next_cell(c.NOT_APPLICABLE if weight is None else weight)
        cursor.next_header_cell(description)

    def write_skill_list(self) -> None:
        cursor = self.cursor
        cursor.next_sheet(c.SKILLS_SHEET, 1, 1)
        cursor.next_row()
        self._write_headers(c.SKILL_HEADERS)
        for skill in self.solution.skill_list:
            cursor.next_row()
            cursor.next_cell(skill.name)
        cursor.auto_size_columns()

    def write_airport_list(self) -> None:
        cursor = self.cursor
        cursor.next_sheet(c.AIRPORTS_SHEET, 1, 1)
        cursor.next_row()
        self._write_headers(c.AIRPORT_HEADERS)
        for airport in self.solution.airport_list:
            cursor.next_row()
            cursor.next_cell(airport.code)
            cursor.next_cell(airport.name)
            cursor.next_cell(airport.latitude)
            cursor.next_cell(airport.longitude)
        cursor.auto_size_columns()

    def write_taxi_time_maps(self) -> None:
        """Write the sparse matrix; a missing entry stays a blank cell."""
        cursor = self.cursor
        cursor.next_sheet(c.TAXI_TIME_SHEET, 1, 2)
        cursor.next_row()
        cursor.next_header_cell(c.TAXI_TIME_TITLE, sized=False)
        cursor.merge_current_cell(self.settings.taxi_time_title_merge_width)
        airport_list = self.solution.airport_list
        cursor.next_row()
        cursor.next_header_cell(c.TAXI_TIME_CORNER_HEADER)
        for airport in airport_list:
            cursor.next_header_cell(airport.code)
        for a in airport_list:
            cursor.next_row()
            cursor.next_header_cell(a.code)
            for b in airport_list:
                cursor.next_cell(a.get_taxi_time_in_minutes_to(b))
        cursor.auto_size_columns()

    def write_employee_list(self) -> None:
        cursor = self.cursor
        cursor.next_sheet(c.EMPLOYEES_SHEET, 1, 2)
        cursor.next_row()
        self._write_headers(c.EMPLOYEE_SPACER_HEADERS)
        cursor.next_row()
        self._write_headers(c.EMPLOYEE_HEADERS)
        for employee in self.solution.employee_list:
            cursor.next_row()
            cursor.next_cell(employee.name)
            cursor.next_cell(employee.home_airport.code)
            cursor.next_cell(c.LIST_SEPARATOR.join(employee.skill_names) or None)
        cursor.auto_size_columns()

    def write_flight_list_and_flight_assignment_list(self) -> None:
        cursor = self.cursor
        cursor.next_sheet(c.FLIGHTS_SHEET, 1, 1)
        cursor.next_row()
        self._write_headers(c.FLIGHT_HEADERS)
        assignments_by_flight = self.solution.get_flight_assignments_by_flight()
        for flight in self.solution.flight_list:
            cursor.next_row()
            cursor.next_cell(flight.flight_number)
            cursor.next_cell(flight.departure_airport.code)
            cursor.next_cell(flight.departure_utc_date_time.strftime(c.DATE_TIME_FORMAT))
            cursor.next_cell(flight.arrival_airport.code)
            cursor.next_cell(flight.arrival_utc_date_time.strftime(c.DATE_TIME_FORMAT))
            required_skills = c.LIST_SEPARATOR.join(
                assignment.required_skill.name
                for assignment in assignments_by_flight.get(flight, [])
            )
            cursor.next_cell(required_skills or None)
        cursor.auto_size_columns()
