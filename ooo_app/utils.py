import re
import unicodedata
from datetime import datetime, date, timedelta, timezone
from typing import Any, Optional

import gspread.utils as a1
from dateutil import parser as dateparser

# Google Sheets serial day 0
SHEETS_EPOCH = date(1899, 12, 30)
_WEEKDAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
_SERIAL_RE = re.compile(r"^\d+(?:\.\d+)?$")

# ───────────────────────── Dates ─────────────────────────
def are_dates_equal(a: Optional[date], b: Optional[date]) -> bool:
    if a is None or b is None:
        return False
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)

def is_weekday_date(d: Optional[date]) -> bool:
    if d is None:
        return False
    return d.weekday() < 5

def format_date(d: Optional[date]) -> str:
    """'Mon 2021-03-01'. Weekday names are fixed English, never locale."""
    if d is None:
        return "(unknown date)"
    return f"{_WEEKDAY_ABBR[d.weekday()]} {d.isoformat()}"

def _to_utc_date(dt: datetime) -> date:
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return dt.date()

def serial_to_date(serial: float) -> Optional[date]:
    if serial < 0:
        return None
    try:
        return SHEETS_EPOCH + timedelta(days=int(serial))
    except OverflowError:
        return None

def parse_date_text(text: Optional[str]) -> Optional[date]:
    """
    Parse free text into a date with dateutil.
    - ambiguous numeric dates are month-first: 01/02/2020 is January 2
    - missing year falls back to the current year
    - month and day must both be in the text, otherwise None
    - surrounding words are skipped, but leftover digits reject the text
    - text without any digit is rejected (no bare weekday names)
    """
    s = collapse_spaces(unicodedata.normalize("NFKC", text or ""))
    if not s or not re.search(r"\d", s):
        return None
    year = date.today().year
    try:
        dt, skipped = dateparser.parse(s, dayfirst=False, fuzzy_with_tokens=True, default=datetime(year, 1, 1))
        # second pass with another default: any field that moves came from the default
        alt, _ = dateparser.parse(s, dayfirst=False, fuzzy_with_tokens=True, default=datetime(year, 2, 2))
    except (ValueError, OverflowError):
        return None
    if (dt.month, dt.day) != (alt.month, alt.day):
        return None
    if any(re.search(r"\d", tok) for tok in skipped):
        return None
    years = re.findall(r"(?<!\d)\d{4}(?!\d)", s)
    if years and str(dt.year) not in years:
        return None
    return _to_utc_date(dt)

def parse_sheet_date(value: Any) -> Optional[date]:
    """Header cell → date. Accepts serial day numbers or date-like strings."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return serial_to_date(value)
    s = str(value).strip()
    if _SERIAL_RE.match(s):
        return serial_to_date(float(s))
    return parse_date_text(s)

# ───────────────────────── Columns ─────────────────────────
def column_label(index: int) -> str:
    """Zero-based column index → A1 letters (0 → 'A', 26 → 'AA')."""
    return re.sub(r"\d+$", "", a1.rowcol_to_a1(1, index + 1))

def column_index(label: str) -> int:
    """Inverse of column_label."""
    _, col = a1.a1_to_rowcol(f"{label.strip().upper()}1")
    return col - 1

def cell_coord(col: str, row: int) -> str:
    return f"{col}{row}"

def coord_range(first: str, last: str) -> str:
    return first if first == last else f"{first}:{last}"

# ───────────────────────── Text ─────────────────────────
def collapse_spaces(s: str) -> str:
    return re.sub(r"\s+", " ", s).strip()

def normalize_login(login: Any) -> str:
    if login is None:
        return ""
    return collapse_spaces(unicodedata.normalize("NFKC", str(login))).casefold()
