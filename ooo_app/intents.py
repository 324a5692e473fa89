import re
from typing import Optional

from .config import COMMAND_KEYWORD
from .models import OooCommandRange
from .utils import parse_date_text

# ───────────────────────── Patterns ─────────────────────────
# "/ooo" anywhere in the body (not inside a word or a path); the rest of that line is the date expression
COMMAND_RE = re.compile(r"(?<![\w/])" + re.escape(COMMAND_KEYWORD) + r"\b(?P<args>[^\r\n]*)", re.I)

# ISO dates contain '-', so a hyphen only delimits when spaced out; en/em dashes always do
RANGE_SPLIT_RE = re.compile(r"\s+(?:to|until|till|til|through|thru|-|–|—)\s+|\s*[–—]\s*", re.I)

LEAD_WORDS_RE = re.compile(r"^(?:from|on|starting|between)\s+", re.I)

# "Mar 1-5", "March 1st–5th, 2021": one month, a day range, optional year
SHORT_RANGE_RE = re.compile(
    r"^(?P<mon>[A-Za-z]{3,9}\.?)\s+(?P<d1>\d{1,2})(?:st|nd|rd|th)?\s*[-–—]\s*(?P<d2>\d{1,2})(?:st|nd|rd|th)?"
    r"(?:,?\s+(?P<year>\d{4}))?(?![\w-])",
    re.I,
)

_PUNCT = " \t.,;:!?()[]{}<>\"'`*_~"

# ───────────────────────── Helpers ─────────────────────────
def _clean_side(s: str) -> str:
    s = s.strip(_PUNCT)
    s = LEAD_WORDS_RE.sub("", s)
    return s.strip(_PUNCT)

# ───────────────────────── Parser ─────────────────────────
def extract_ooo_command_dates(text: Optional[str]) -> Optional[OooCommandRange]:
    """
    Find an OOO slash command in a comment body.

    None → there is no command at all.
    OooCommandRange with None fields → the command is there but its dates are not.
    Examples: '/ooo 2021-03-01 to 2021-03-05', '/ooo Mar 1 - Mar 5', '/ooo Mar 1-5 2021',
    '/ooo 3/1/2021'. Words after the dates ("for spring break") are ignored.
    """
    m = COMMAND_RE.search(text or "")
    if not m:
        return None

    expr = _clean_side(m.group("args"))
    if not expr:
        return OooCommandRange(start_date=None, end_date=None)

    short = SHORT_RANGE_RE.match(expr)
    if short:
        year = f" {short.group('year')}" if short.group("year") else ""
        start = parse_date_text(f"{short.group('mon')} {short.group('d1')}{year}")
        end = parse_date_text(f"{short.group('mon')} {short.group('d2')}{year}")
        return OooCommandRange(start_date=start, end_date=end)

    parts = RANGE_SPLIT_RE.split(expr, maxsplit=1)
    if len(parts) == 2:
        start = parse_date_text(_clean_side(parts[0]))
        end = parse_date_text(_clean_side(parts[1]))
    else:
        # single date → one-day range
        start = end = parse_date_text(expr)
    return OooCommandRange(start_date=start, end_date=end)
