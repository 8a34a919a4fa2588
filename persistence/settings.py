"""Presentation settings for written workbooks."""

from dataclasses import dataclass


@dataclass
class XlsxSettings:
    """
    Layout options used by the workbook writer.

    None of these affect what the reader accepts.
    """
    # Column sizing
    min_column_width: int = 8
    max_column_width: int = 60
    column_padding: int = 2

    # Header style (ARGB hex without alpha)
    header_font_color: str = "FFFFFF"
    header_fill_color: str = "4472C4"

    # Number of columns the taxi time title spans
    taxi_time_title_merge_width: int = 11

    freeze_panes: bool = True
