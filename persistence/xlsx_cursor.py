"""Sequential cell cursors over openpyxl workbooks."""

import logging
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from openpyxl import Workbook
from openpyxl.cell import Cell
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from persistence.exceptions import FormatError, SchemaViolation
from persistence.settings import XlsxSettings

logger = logging.getLogger(__name__)

Number = Union[int, float]


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class XlsxCursor:
    """
    Forward-only read cursor: sheet by sheet, row by row, cell by cell.

    The cursor always knows the current sheet, row and column, so every
    validation error it raises is positioned.
    """

    def __init__(self, workbook: Workbook):
        self.workbook = workbook
        self.sheet_name: Optional[str] = None
        self.row: Tuple[Any, ...] = ()
        self.row_number = 0
        self.column_index = -1
        self._rows: Iterator[Tuple[Any, ...]] = iter(())

    def open_sheet(self, name: str) -> None:
        """Position before the first row of the named sheet."""
        if name not in self.workbook.sheetnames:
            raise SchemaViolation(
                f"Workbook sheet ({name})",
                f"The sheet ({name}) does not exist in the workbook sheets "
                f"({self.workbook.sheetnames}).",
                value=name
            )
        sheet = self.workbook[name]
        # Explicit bounds: leading blank rows are significant for headers
        self._rows = sheet.iter_rows(
            min_row=1,
            max_row=sheet.max_row,
            min_col=1,
            max_col=sheet.max_column,
            values_only=True
        )
        self.sheet_name = name
        self.row = ()
        self.row_number = 0
        self.column_index = -1
        logger.debug(f"Opened sheet ({name}) with {sheet.max_row} rows")

    def advance_row(self, skip_blank_rows: bool = True) -> bool:
        """
        Move to the next row.

        Args:
            skip_blank_rows: Skip rows without any non-blank cell

        Returns:
            False when the sheet has no more rows
        """
        while True:
            row = next(self._rows, None)
            if row is None:
                self.row = ()
                self.column_index = -1
                return False
            self.row_number += 1
            self.row = row
            self.column_index = -1
            if not skip_blank_rows or not all(_is_blank(v) for v in row):
                return True

    def require_row(self, skip_blank_rows: bool = True) -> None:
        """Move to the next row, failing at the end of the sheet."""
        if not self.advance_row(skip_blank_rows):
            raise SchemaViolation(
                self.current_position(),
                "The sheet ends before an expected row."
            )

    def current_position(self) -> str:
        column = get_column_letter(max(self.column_index, 0) + 1)
        return f"Sheet ({self.sheet_name}) cell ({column}{max(self.row_number, 1)})"

    def next_value(self) -> Any:
        """Consume the next cell and return its raw value."""
        self.column_index += 1
        if self.column_index < len(self.row):
            return self.row[self.column_index]
        return None

    def read_header_cell(self, expected_label: str) -> None:
        """Consume the next cell and fail unless its text is expected_label."""
        value = self.next_value()
        text = "" if value is None else value
        if not isinstance(text, str) or text != expected_label:
            raise SchemaViolation(
                self.current_position(),
                f"The cell ({value!r}) does not contain the expected "
                f"header ({expected_label!r}).",
                value=value
            )

    def read_string_cell(self) -> str:
        value = self.next_value()
        if _is_blank(value):
            raise FormatError(
                self.current_position(),
                "The cell is blank but a text value is required.",
                value=value
            )
        if not isinstance(value, str):
            raise FormatError(
                self.current_position(),
                f"The cell ({value!r}) must be a text cell.",
                value=value
            )
        return value

    def read_optional_string_cell(self) -> Optional[str]:
        """Like read_string_cell(), but a blank cell yields None."""
        value = self.next_value()
        if _is_blank(value):
            return None
        if not isinstance(value, str):
            raise FormatError(
                self.current_position(),
                f"The cell ({value!r}) must be a text cell.",
                value=value
            )
        return value

    def read_numeric_cell(self) -> Number:
        value = self.next_value()
        if _is_blank(value):
            raise FormatError(
                self.current_position(),
                "The cell is blank but a numeric value is required.",
                value=value
            )
        return self._require_number(value)

    def read_optional_numeric_cell(self) -> Optional[Number]:
        """Like read_numeric_cell(), but a blank cell yields None."""
        value = self.next_value()
        if _is_blank(value):
            return None
        return self._require_number(value)

    def read_integer_cell(self) -> int:
        value = self.read_numeric_cell()
        if int(value) != value:
            raise FormatError(
                self.current_position(),
                f"The value ({value}) must be an integer.",
                value=value
            )
        return int(value)

    def _require_number(self, value: Any) -> Number:
        if not _is_number(value):
            raise FormatError(
                self.current_position(),
                f"The cell ({value!r}) must be a numeric cell.",
                value=value
            )
        return value


class XlsxSheetWriter:
    """
    Forward-only write cursor building a new openpyxl workbook.

    Tracks the widest value per column so every sheet can be auto-sized
    once it is complete.
    """

    def __init__(self, settings: Optional[XlsxSettings] = None):
        self.settings = settings or XlsxSettings()
        self.workbook = Workbook()
        self.sheet = None
        self.row_number = 0
        self.column_number = 0
        self._column_widths: Dict[int, int] = {}
        self._uses_default_sheet = True

        self.header_font = Font(bold=True, color=self.settings.header_font_color)
        self.header_fill = PatternFill(
            start_color=self.settings.header_fill_color,
            end_color=self.settings.header_fill_color,
            fill_type="solid"
        )

    def next_sheet(self, name: str, frozen_columns: int = 0, frozen_rows: int = 0) -> None:
        if self._uses_default_sheet:
            self.sheet = self.workbook.active
            self.sheet.title = name
            self._uses_default_sheet = False
        else:
            self.sheet = self.workbook.create_sheet(name)
        if self.settings.freeze_panes and (frozen_columns or frozen_rows):
            self.sheet.freeze_panes = self.sheet.cell(
                row=frozen_rows + 1, column=frozen_columns + 1
            ).coordinate
        self.row_number = 0
        self.column_number = 0
        self._column_widths = {}
        logger.debug(f"Writing sheet ({name})")

    def next_row(self) -> None:
        self.row_number += 1
        self.column_number = 0

    def next_cell(self, value: Any = None, sized: bool = True) -> Cell:
        """Write the next cell; None leaves it blank."""
        self.column_number += 1
        cell = self.sheet.cell(row=self.row_number, column=self.column_number)
        if value is not None:
            cell.value = value
            if isinstance(value, str):
                # openpyxl treats a leading "=" as a formula
                cell.data_type = "s"
            if sized:
                width = len(str(value))
                if width > self._column_widths.get(self.column_number, 0):
                    self._column_widths[self.column_number] = width
        return cell

    def next_header_cell(self, label: str, sized: bool = True) -> Cell:
        cell = self.next_cell(label, sized=sized)
        cell.font = self.header_font
        cell.fill = self.header_fill
        cell.alignment = Alignment(horizontal="left")
        return cell

    def merge_current_cell(self, width: int) -> None:
        """Merge the last written cell with the width - 1 cells to its right."""
        self.sheet.merge_cells(
            start_row=self.row_number,
            start_column=self.column_number,
            end_row=self.row_number,
            end_column=self.column_number + width - 1
        )

    def auto_size_columns(self) -> None:
        for column, width in self._column_widths.items():
            width = min(
                max(width + self.settings.column_padding, self.settings.min_column_width),
                self.settings.max_column_width
            )
            self.sheet.column_dimensions[get_column_letter(column)].width = width
