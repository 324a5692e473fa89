from __future__ import annotations
import html
from typing import List, Sequence

from .config import SHEET_URL_TEMPLATE
from .models import OldValue, TargetCell
from .utils import coord_range, format_date

EMPTY_CELL = "<em>{empty}</em>"
MERGED_CELL = "<em>{belongs to a merged range... could not be updated}</em>"

def sheet_link(spreadsheet_id: str, sheet_id, a1_range: str, *, escape_amp: bool = False) -> str:
    url = SHEET_URL_TEMPLATE.format(spreadsheet_id=spreadsheet_id, sheet_id=sheet_id, a1=a1_range)
    return url.replace("&", "&amp;") if escape_amp else url

def targets_range(targets: Sequence[TargetCell]) -> str:
    return coord_range(targets[0].coord, targets[-1].coord)

def render_old_value(old: OldValue) -> str:
    if old.merged:
        return MERGED_CELL
    if old.value is None or old.value == "":
        return EMPTY_CELL
    return f"<code>{html.escape(str(old.value))}</code>"

def render_reply(
    *,
    spreadsheet_id: str,
    sheet_id,
    commenter: str,
    marker: str,
    targets: Sequence[TargetCell],
    old_values: Sequence[OldValue],
) -> str:
    """
    Reply comment: link to the updated range, the new value, and a
    collapsible table of the values each cell held before the write.
    """
    range_link = sheet_link(spreadsheet_id, sheet_id, targets_range(targets))
    lines: List[str] = [
        "",
        f"The [Services schedule has been updated]({range_link}) based on your `ooo` command!",
        "",
        "<details>",
        "  <summary>See the updates...</summary>",
        "",
        "  <br />",
        "",
        "  <strong>New Value:</strong>",
        "",
        f"  `{marker}`",
        "",
        "  <strong>Old Values:</strong>",
        "",
        "  <table>",
        "    <tr>",
        "      <td></td>",
        f'      <th align="left">@{commenter}</th>',
        "    </tr>",
    ]
    for target, old in zip(targets, old_values):
        cell_link = sheet_link(spreadsheet_id, sheet_id, target.coord, escape_amp=True)
        lines += [
            "    <tr>",
            f'      <th nowrap>{format_date(target.date_cell.value)}<br />[<a href="{cell_link}">{target.coord}</a>]</th>',
            f"      <td>{render_old_value(old)}</td>",
            "    </tr>",
        ]
    lines += ["  </table>", "</details>", ""]
    return "\n".join(lines)
