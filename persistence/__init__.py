"""Spreadsheet persistence for flight crew scheduling."""

from persistence.exceptions import (
    FlightCrewFileError,
    XlsxValidationError,
    SchemaViolation,
    UnresolvedReferenceError,
    FormatError,
    TransportError,
    SolutionFileError,
)
from persistence.file_io import read, write
from persistence.reader import FlightCrewXlsxReader
from persistence.report import ScoreViewRenderer
from persistence.settings import XlsxSettings
from persistence.writer import FlightCrewXlsxWriter

__all__ = [
    "read",
    "write",
    "FlightCrewXlsxReader",
    "FlightCrewXlsxWriter",
    "ScoreViewRenderer",
    "XlsxSettings",
    "FlightCrewFileError",
    "XlsxValidationError",
    "SchemaViolation",
    "UnresolvedReferenceError",
    "FormatError",
    "TransportError",
    "SolutionFileError",
]
