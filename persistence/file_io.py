"""read() and write(): the file boundary of the workbook I/O."""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from models import ConstraintMatchTotal, FlightCrewSolution
from persistence.exceptions import SolutionFileError, TransportError
from persistence.reader import FlightCrewXlsxReader
from persistence.settings import XlsxSettings
from persistence.writer import FlightCrewXlsxWriter

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read(path: PathLike) -> FlightCrewSolution:
    """
    Read a flight crew workbook.

    Args:
        path: Path of the .xlsx file

    Returns:
        The problem, with ids assigned in sheet order

    Raises:
        SolutionFileError: On any I/O or validation failure; the
            original error is chained as __cause__
    """
    path = Path(path)
    logger.info(f"Reading solution file ({path})")
    try:
        try:
            with open(path, "rb") as stream:
                workbook = load_workbook(stream, data_only=True)
        except (OSError, BadZipFile, InvalidFileException, KeyError, ValueError) as e:
            raise TransportError(f"Could not open the workbook ({path}): {e}") from e
        return FlightCrewXlsxReader(workbook).read()
    except Exception as e:
        logger.error(f"Failed reading input solution file ({path}): {e}")
        raise SolutionFileError(
            f"Failed reading input solution file ({path}): {e}", path, e
        ) from e


def write(
    solution: FlightCrewSolution,
    path: PathLike,
    constraint_match_totals: Iterable[ConstraintMatchTotal] = (),
    settings: Optional[XlsxSettings] = None
) -> None:
    """
    Write a flight crew workbook, including the score view sheet.

    Args:
        solution: The problem, solved or not
        path: Path of the .xlsx file to create or overwrite
        constraint_match_totals: Score breakdown supplied by the solver
        settings: Layout options

    Raises:
        SolutionFileError: On any failure. The output file may be left
            incomplete.
    """
    path = Path(path)
    logger.info(f"Writing solution file ({path})")
    try:
        workbook = FlightCrewXlsxWriter(solution, constraint_match_totals, settings).write()
        try:
            with open(path, "wb") as stream:
                workbook.save(stream)
        except OSError as e:
            raise TransportError(f"Could not save the workbook ({path}): {e}") from e
    except Exception as e:
        logger.error(f"Failed writing output solution file ({path}): {e}")
        raise SolutionFileError(
            f"Failed writing output solution file ({path}): {e}",
            path,
            e
        ) from e
