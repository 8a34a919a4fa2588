"""Exceptions raised while reading or writing flight crew workbooks."""

from pathlib import Path
from typing import Any, Iterable, Optional, Union


class FlightCrewFileError(Exception):
    """Base class for all workbook file I/O errors."""


class XlsxValidationError(FlightCrewFileError):
    """
    The workbook content is invalid.

    Attributes:
        position: Human-readable cell position, e.g. "Sheet (Skills) cell (A3)"
        value: The offending cell value
    """

    def __init__(self, position: str, message: str, value: Any = None):
        super().__init__(f"{position}: {message}")
        self.position = position
        self.value = value


class SchemaViolation(XlsxValidationError):
    """A sheet or header label does not match the expected template."""


class UnresolvedReferenceError(XlsxValidationError):
    """A natural key (skill name, airport code) does not resolve."""

    def __init__(self, position: str, message: str, key: str, known_keys: Iterable[str]):
        super().__init__(position, message, value=key)
        self.key = key
        self.known_keys = list(known_keys)


class FormatError(XlsxValidationError):
    """A cell has the wrong type, is blank, or violates a domain constraint."""


class TransportError(FlightCrewFileError):
    """The workbook could not be opened, parsed or saved."""


class SolutionFileError(FlightCrewFileError):
    """
    Terminal error raised by read() and write().

    The original error is chained as __cause__.
    """

    def __init__(self, message: str, path: Union[str, Path], cause: Optional[BaseException] = None):
        super().__init__(message)
        self.path = Path(path)
        self.cause = cause
