"""Score view sheet rendering the solver's constraint match breakdown."""

from typing import Iterable, List, Optional

from models import ConstraintMatch, ConstraintMatchTotal, HardSoftScore, JustificationKind
from persistence import constants as c
from persistence.xlsx_cursor import XlsxSheetWriter


def describe_match(constraint_match: ConstraintMatch) -> str:
    """Indented list of the flights a match is about."""
    flights: List[str] = []
    for justification in constraint_match.justification_list:
        if justification.kind is JustificationKind.FLIGHT_ASSIGNMENT:
            flights.append(str(justification.value.flight))
    return c.MATCH_INDENT + c.LIST_SEPARATOR.join(flights)


class ScoreViewRenderer:
    """Write-only: the score view has no reader counterpart."""

    def __init__(self, cursor: XlsxSheetWriter):
        self.cursor = cursor

    def render(
        self,
        score: Optional[HardSoftScore],
        constraint_match_totals: Iterable[ConstraintMatchTotal]
    ) -> None:
        cursor = self.cursor
        cursor.next_sheet(c.SCORE_VIEW_SHEET, 1, 3)
        cursor.next_row()
        cursor.next_header_cell(c.SCORE_LABEL)
        if score is None:
            cursor.next_cell(c.NOT_YET_SOLVED)
            cursor.auto_size_columns()
            return
        cursor.next_cell(score.to_short_string())
        cursor.next_row()
        cursor.next_row()
        for label in c.SCORE_VIEW_HEADERS:
            cursor.next_header_cell(label)

        for constraint_match_total in constraint_match_totals:
            cursor.next_row()
            cursor.next_header_cell(constraint_match_total.constraint_name)
            cursor.next_cell()
            cursor.next_cell(constraint_match_total.score.to_short_string())
            matches = sorted(
                constraint_match_total.constraint_match_set,
                key=lambda match: match.score
            )
            for constraint_match in matches:
                cursor.next_row()
                cursor.next_cell(describe_match(constraint_match))
                cursor.next_cell(constraint_match.score.to_short_string())
        cursor.auto_size_columns()
