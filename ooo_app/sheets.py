from __future__ import annotations
import logging
from typing import Any, Dict, List, Sequence, Tuple

import gspread
import gspread.utils as a1
from google.oauth2.service_account import Credentials

from .config import SHEETS_SCOPES, Settings
from .extended import get_actual_value_from_extended_value
from .models import OldValue

log = logging.getLogger(__name__)

def get_gspread_client(settings: Settings) -> gspread.Client:
    info = {
        "type": "service_account",
        "client_email": settings.google_client_email,
        "private_key": settings.google_private_key,
        "token_uri": "https://oauth2.googleapis.com/token",
    }
    credentials = Credentials.from_service_account_info(info, scopes=SHEETS_SCOPES)
    return gspread.authorize(credentials)

def _first_col(block) -> List[Any]:
    # ROWS-major read of one column: [[v1], [], [v3], ...]
    return [r[0] if r else "" for r in (block or [])]

def _first_row(block) -> List[Any]:
    return list(block[0]) if block else []

def parse_old_values(meta: Dict[str, Any], count: int) -> Tuple[int | None, List[OldValue]]:
    """
    Pull (sheetId, prior values) out of a spreadsheets.get response made with
    includeGridData and one single-cell range per target, in request order.
    """
    sheets = meta.get("sheets") or []
    target = sheets[0] if sheets else {}
    sheet_id = (target.get("properties") or {}).get("sheetId")
    grids = target.get("data") or []
    out: List[OldValue] = []
    for i in range(count):
        grid = grids[i] if i < len(grids) else {}
        row_data = grid.get("rowData")
        # no rowData: the cell belongs to a merged range but is not the one holding its value
        if not row_data:
            out.append(OldValue(merged=True))
            continue
        values = row_data[0].get("values") or []
        cell = values[0] if values else {}
        out.append(OldValue(merged=False, value=get_actual_value_from_extended_value(cell.get("userEnteredValue"))))
    return sheet_id, out


class SheetGateway:
    """The three Sheets calls one run makes: joint header read, prior-value read, batch write."""

    def __init__(self, ss: gspread.Spreadsheet, ws: gspread.Worksheet, settings: Settings):
        self.ss = ss
        self.ws = ws
        self.settings = settings

    @classmethod
    def from_settings(cls, settings: Settings) -> "SheetGateway":
        client = get_gspread_client(settings)
        ss = client.open_by_key(settings.spreadsheet_id)
        return cls(ss, ss.worksheet(settings.sheet_name), settings)

    def read_header_and_logins(self) -> Tuple[List[Any], List[Any]]:
        """Date header row and login column, fetched in a single batchGet."""
        row, col = self.settings.date_row, self.settings.login_col
        # dates come back as serial day numbers, independent of the sheet locale
        blocks = self.ws.batch_get(
            [f"{row}:{row}", f"{col}:{col}"],
            major_dimension="ROWS",
            value_render_option=a1.ValueRenderOption.unformatted,
            date_time_render_option=a1.DateTimeOption.serial_number,
        )
        date_block = blocks[0] if len(blocks) > 0 else []
        login_block = blocks[1] if len(blocks) > 1 else []
        return _first_row(date_block), _first_col(login_block)

    def read_old_values(self, coords: Sequence[str]) -> Tuple[int | None, List[OldValue]]:
        ranges = [a1.absolute_range_name(self.ws.title, c) for c in coords]
        meta = self.ss.fetch_sheet_metadata(params={"ranges": ranges, "includeGridData": "true"})
        return parse_old_values(meta, len(coords))

    def write_marker(self, coords: Sequence[str], value: str) -> Dict[str, Any]:
        data = [{"range": c, "values": [[value]]} for c in coords]
        return self.ws.batch_update(data, value_input_option=a1.ValueInputOption.user_entered)
