"""Unit tests for workbook validation while reading."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from persistence import (
    FormatError,
    SchemaViolation,
    SolutionFileError,
    TransportError,
    UnresolvedReferenceError,
    read,
)
from persistence import constants as c


def read_error(save_sheets, sheets):
    """Read the sheets and return the wrapped cause of the failure."""
    path = save_sheets(sheets)
    with pytest.raises(SolutionFileError) as exc_info:
        read(path)
    assert exc_info.value.path == path
    assert str(path) in str(exc_info.value)
    assert exc_info.value.__cause__ is exc_info.value.cause
    return exc_info.value.cause


class TestReaderValidation:
    """Tests for malformed input workbooks."""

    def test_scenario_reads(self, save_sheets, scenario_sheets):
        """Test the unmodified scenario is valid."""
        solution = read(save_sheets(scenario_sheets))
        assert solution.parametrization.nights_away_from_base_fairness == 1000
        assert solution.parametrization.id == 0

    def test_missing_home_airport(self, save_sheets, scenario_sheets):
        """Test an unknown home airport names the code and known codes."""
        scenario_sheets[c.EMPLOYEES_SHEET][2] = ("Ann", "CDG", "Pilot")
        error = read_error(save_sheets, scenario_sheets)
        assert isinstance(error, UnresolvedReferenceError)
        assert error.key == "CDG"
        assert error.known_keys == ["LHR", "JFK"]
        assert error.position == "Sheet (Employees) cell (B3)"

    def test_invalid_name_rejected_first(self, save_sheets, scenario_sheets):
        """Test the name check runs before the rest of the row."""
        scenario_sheets[c.EMPLOYEES_SHEET][2] = ("Ann <admin>", "CDG", "Navigator")
        error = read_error(save_sheets, scenario_sheets)
        assert isinstance(error, FormatError)
        assert error.value == "Ann <admin>"
        assert error.position == "Sheet (Employees) cell (A3)"

    def test_trailing_newline_in_name(self, save_sheets, scenario_sheets):
        """Test the name pattern must cover the whole cell text."""
        scenario_sheets[c.EMPLOYEES_SHEET][2] = ("Ann\n", "LHR", "Pilot")
        error = read_error(save_sheets, scenario_sheets)
        assert isinstance(error, FormatError)
        assert error.value == "Ann\n"

    @pytest.mark.parametrize("name", ["Ann", "Jean-Luc O'Brien", "D. Smith (Jr)", "Zoë"])
    def test_valid_names(self, save_sheets, scenario_sheets, name):
        """Test names with allowed punctuation are accepted."""
        scenario_sheets[c.EMPLOYEES_SHEET][2] = (name, "LHR", "Pilot")
        assert read(save_sheets(scenario_sheets)).employee_list[0].name == name

    def test_unknown_employee_skill(self, save_sheets, scenario_sheets):
        """Test an unknown skill in an employee skill list."""
        scenario_sheets[c.EMPLOYEES_SHEET][2] = ("Ann", "LHR", "Pilot, Navigator")
        error = read_error(save_sheets, scenario_sheets)
        assert isinstance(error, UnresolvedReferenceError)
        assert error.key == "Navigator"
        assert error.known_keys == ["Pilot", "FlightAttendant"]

    def test_unknown_required_skill(self, save_sheets, scenario_sheets):
        """Test an unknown skill in a flight requirement list."""
        row = list(scenario_sheets[c.FLIGHTS_SHEET][1])
        row[5] = "Pilot, Pilot, Purser"
        scenario_sheets[c.FLIGHTS_SHEET][1] = row
        error = read_error(save_sheets, scenario_sheets)
        assert isinstance(error, UnresolvedReferenceError)
        assert error.key == "Purser"
        assert "FL1" in str(error)

    def test_unknown_arrival_airport(self, save_sheets, scenario_sheets):
        """Test an unknown arrival airport code."""
        row = list(scenario_sheets[c.FLIGHTS_SHEET][1])
        row[3] = "ORD"
        scenario_sheets[c.FLIGHTS_SHEET][1] = row
        error = read_error(save_sheets, scenario_sheets)
        assert isinstance(error, UnresolvedReferenceError)
        assert error.position == "Sheet (Flights) cell (D2)"

    @pytest.mark.parametrize("text", [
        "2024-1-01T08:00",
        "2024-01-01 08:00",
        "2024-13-01T08:00",
        "01/01/2024",
        "2024-01-01T08:00\n",
    ])
    def test_malformed_date_time(self, save_sheets, scenario_sheets, text):
        """Test date times must use the exact pattern."""
        row = list(scenario_sheets[c.FLIGHTS_SHEET][1])
        row[2] = text
        scenario_sheets[c.FLIGHTS_SHEET][1] = row
        error = read_error(save_sheets, scenario_sheets)
        assert isinstance(error, FormatError)
        assert error.value == text
        assert error.position == "Sheet (Flights) cell (C2)"

    def test_header_mismatch(self, save_sheets, scenario_sheets):
        """Test a renamed header column is a schema violation."""
        scenario_sheets[c.AIRPORTS_SHEET][0] = ("Code", "Name", "Longitude", "Latitude")
        error = read_error(save_sheets, scenario_sheets)
        assert isinstance(error, SchemaViolation)
        assert error.position == "Sheet (Airports) cell (C1)"

    def test_taxi_time_column_order(self, save_sheets, scenario_sheets):
        """Test taxi time columns must follow the airport order."""
        scenario_sheets[c.TAXI_TIME_SHEET][1] = ("Airport code", "JFK", "LHR")
        error = read_error(save_sheets, scenario_sheets)
        assert isinstance(error, SchemaViolation)
        assert error.value == "JFK"

    def test_missing_sheet(self, save_sheets, scenario_sheets):
        """Test a missing sheet is a schema violation."""
        del scenario_sheets[c.TAXI_TIME_SHEET]
        error = read_error(save_sheets, scenario_sheets)
        assert isinstance(error, SchemaViolation)
        assert c.TAXI_TIME_SHEET in str(error)

    def test_latitude_must_be_numeric(self, save_sheets, scenario_sheets):
        """Test wrong cell type is a format error."""
        scenario_sheets[c.AIRPORTS_SHEET][1] = ("LHR", "London Heathrow", "north", -0.4543)
        error = read_error(save_sheets, scenario_sheets)
        assert isinstance(error, FormatError)
        assert error.position == "Sheet (Airports) cell (C2)"

    def test_blank_airport_name(self, save_sheets, scenario_sheets):
        """Test a required text cell may not be blank."""
        scenario_sheets[c.AIRPORTS_SHEET][1] = ("LHR", None, 51.47, -0.4543)
        error = read_error(save_sheets, scenario_sheets)
        assert isinstance(error, FormatError)

    def test_duplicate_airport_code(self, save_sheets, scenario_sheets):
        """Test natural keys are unique."""
        scenario_sheets[c.AIRPORTS_SHEET].append(("LHR", "Again", 1.0, 1.0))
        error = read_error(save_sheets, scenario_sheets)
        assert isinstance(error, SchemaViolation)
        assert error.value == "LHR"

    def test_fractional_weight(self, save_sheets, scenario_sheets):
        """Test constraint weights must be integers."""
        scenario_sheets[c.CONFIGURATION_SHEET][1] = (
            "Nights away from base fairness", 1.5, c.NIGHTS_AWAY_FROM_BASE_FAIRNESS_DESCRIPTION
        )
        error = read_error(save_sheets, scenario_sheets)
        assert isinstance(error, FormatError)
        assert error.position == "Sheet (Configuration) cell (B2)"

    def test_not_applicable_weight(self, save_sheets, scenario_sheets):
        """Test the required skill weight must stay n/a."""
        scenario_sheets[c.CONFIGURATION_SHEET][3] = ("Required skill", 5, c.REQUIRED_SKILL_DESCRIPTION)
        error = read_error(save_sheets, scenario_sheets)
        assert isinstance(error, FormatError)

    def test_missing_file(self, tmp_path):
        """Test an absent file is a transport error."""
        path = tmp_path / "absent.xlsx"
        with pytest.raises(SolutionFileError) as exc_info:
            read(path)
        assert isinstance(exc_info.value.cause, TransportError)

    def test_not_a_workbook(self, tmp_path):
        """Test a non-zip file is a transport error."""
        path = tmp_path / "text.xlsx"
        path.write_text("not a spreadsheet")
        with pytest.raises(SolutionFileError) as exc_info:
            read(path)
        assert isinstance(exc_info.value.cause, TransportError)
