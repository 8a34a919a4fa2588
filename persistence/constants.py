"""Sheet names, header labels and cell formats of the workbook."""

import re

CONFIGURATION_SHEET = "Configuration"
SKILLS_SHEET = "Skills"
AIRPORTS_SHEET = "Airports"
TAXI_TIME_SHEET = "Taxi time"
EMPLOYEES_SHEET = "Employees"
FLIGHTS_SHEET = "Flights"
SCORE_VIEW_SHEET = "Score view"

CONFIGURATION_HEADERS = ("Constraint", "Weight", "Description")
SKILL_HEADERS = ("Name",)
AIRPORT_HEADERS = ("Code", "Name", "Latitude", "Longitude")
TAXI_TIME_TITLE = (
    "Driving time in minutes by taxi between two nearby airports "
    "to allow employees to start from a different airport."
)
TAXI_TIME_CORNER_HEADER = "Airport code"
EMPLOYEE_SPACER_HEADERS = ("", "", "")
EMPLOYEE_HEADERS = ("Name", "Home airport", "Skills")
FLIGHT_HEADERS = (
    "Flight number",
    "Departure airport code",
    "Departure UTC date time",
    "Arrival airport code",
    "Arrival UTC date time",
    "Employee skill requirements",
)
SCORE_VIEW_HEADERS = ("Constraint match", "Match score", "Total score")

REQUIRED_SKILL_DESCRIPTION = "Hard penalty per missing required skill"
NIGHTS_AWAY_FROM_BASE_FAIRNESS_DESCRIPTION = (
    "Soft penalty to load balance the nights away from base"
)
NOT_APPLICABLE = "n/a"

SCORE_LABEL = "Score"
NOT_YET_SOLVED = "Not yet solved"
MATCH_INDENT = "    "

# Multi-value cells, no escaping
LIST_SEPARATOR = ", "

DATE_TIME_FORMAT = "%Y-%m-%dT%H:%M"
# Matched against the whole cell text
DATE_TIME_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}")

VALID_NAME_PATTERN = re.compile(r"[\w&\-./()'][\w&\-./()' ]*[\w&\-./()']?")
