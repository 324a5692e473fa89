from __future__ import annotations
from typing import Any, Iterable, List

from .models import DateCell, LoginCell, LoginValue
from .utils import column_label, normalize_login, parse_sheet_date

def date_column_mapper(value: Any, index: int) -> DateCell:
    """One header cell → DateCell. Pure; unparseable cells keep value=None."""
    return DateCell(value=parse_sheet_date(value), col=column_label(index))

def map_date_row(values: Iterable[Any]) -> List[DateCell]:
    return [date_column_mapper(v, i) for i, v in enumerate(values)]


class LoginRowMapper:
    """
    Maps one login column, top to bottom, into LoginCells.

    The row number comes from an internal counter, not from the value, so an
    instance is only valid for ONE sequential pass over ONE column. Calling
    it again after a pass keeps counting from where it stopped; build a new
    mapper for every column scan.
    """

    def __init__(self, first_row: int = 1):
        self.next_row = first_row

    def __call__(self, value: Any) -> LoginCell:
        row = self.next_row
        self.next_row += 1
        login = normalize_login(value)
        return LoginCell(value=LoginValue(login) if login else None, row=row)

    def map_column(self, values: Iterable[Any]) -> List[LoginCell]:
        return [self(v) for v in values]
