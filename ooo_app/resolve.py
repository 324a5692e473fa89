from __future__ import annotations
import logging
from datetime import date
from typing import List, Sequence, Tuple

from .errors import DateRangeNotFound, EmptyDateRange, LoginNotFound, WeekendOnlyRange
from .models import DateCell, LoginCell, OooCommandRange, TargetCell
from .utils import are_dates_equal, format_date, is_weekday_date, normalize_login

log = logging.getLogger(__name__)

def _find_date_index(date_cells: Sequence[DateCell], d: date) -> int:
    for i, cell in enumerate(date_cells):
        if are_dates_equal(cell.value, d):
            return i
    return -1

def find_login_cell(login_cells: Sequence[LoginCell], login: str, issue_url: str = "") -> LoginCell:
    want = normalize_login(login)
    for cell in login_cells:
        if cell.value and cell.value.login == want:
            return cell
    raise LoginNotFound(f"Could not find row cell matching issue creator's login \"{want}\" for issue: {issue_url}")

def find_date_range(date_cells: Sequence[DateCell], start: date, end: date, issue_url: str = "") -> Tuple[int, int]:
    start_idx = _find_date_index(date_cells, start)
    end_idx = start_idx if are_dates_equal(start, end) else _find_date_index(date_cells, end)
    if start_idx == -1 or end_idx == -1:
        raise DateRangeNotFound(
            f"Could not find column cells matching issue date range "
            f"({format_date(start)} - {format_date(end)}) for issue: {issue_url}"
        )
    return start_idx, end_idx

def resolve_targets(
    date_cells: Sequence[DateCell],
    login_cells: Sequence[LoginCell],
    login: str,
    command: OooCommandRange,
    issue_url: str = "",
) -> List[TargetCell]:
    """
    Cross-reference the header row and login column into the cells to mark.

    The range is sliced inclusively in header order. A reversed range (end
    column left of start column) slices to nothing and is reported as empty.
    """
    login_cell = find_login_cell(login_cells, login, issue_url)
    log.info("Found row cell for issue creator: %s", login_cell)

    start_idx, end_idx = find_date_range(date_cells, command.start_date, command.end_date, issue_url)
    in_range = list(date_cells[start_idx:end_idx + 1])
    log.info("Found %d column cell(s) for days included in date range", len(in_range))
    if not in_range:
        raise EmptyDateRange("This OOO date range does not correspond to any dates in the sheet")

    weekdays = [c for c in in_range if is_weekday_date(c.value)]
    log.info("Found %d column cell(s) for weekdays included in date range: %s", len(weekdays), weekdays)
    if not weekdays:
        raise WeekendOnlyRange("This OOO date range only corresponds to weekend dates")

    return [TargetCell(date_cell=c, login_cell=login_cell) for c in weekdays]
