from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict

from .config import BOT_USER_TYPE, MARKER_TEMPLATE, OOO_TITLE_KEYWORDS, Settings
from .errors import MissingDates, NotApplicable, OooFailure
from .intents import extract_ooo_command_dates
from .mappers import LoginRowMapper, map_date_row
from .models import OooCommandRange, Outcome
from .report import render_reply, sheet_link, targets_range
from .resolve import resolve_targets
from .utils import normalize_login

log = logging.getLogger(__name__)

# ───────────────────────── Event ─────────────────────────
@dataclass(frozen=True)
class CommentEvent:
    issue_number: int
    issue_title: str
    issue_url: str
    issue_author_login: str
    issue_author_id: Any
    comment_body: str
    commenter_login: str
    commenter_id: Any
    commenter_type: str

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "CommentEvent":
        issue = payload["issue"]; comment = payload["comment"]
        return cls(
            issue_number=issue["number"],
            issue_title=issue.get("title") or "",
            issue_url=issue.get("html_url") or "",
            issue_author_login=issue["user"]["login"],
            issue_author_id=issue["user"]["id"],
            comment_body=comment.get("body") or "",
            commenter_login=comment["user"].get("login") or "",
            commenter_id=comment["user"]["id"],
            commenter_type=comment["user"].get("type") or "",
        )

# ───────────────────────── Guards ─────────────────────────
def check_applicable(event: CommentEvent) -> OooCommandRange:
    """Neutral/failure guard chain that runs before any spreadsheet access."""
    title = event.issue_title.lower()
    if not any(k in title for k in OOO_TITLE_KEYWORDS):
        raise NotApplicable("This is not an OOO issue")
    if event.commenter_type == BOT_USER_TYPE:
        raise NotApplicable("This comment is from a bot")
    if event.issue_author_id != event.commenter_id:
        raise NotApplicable("This comment is not from the OOO issue author")

    command = extract_ooo_command_dates(event.comment_body)
    if command is None:
        raise NotApplicable("This comment does not contain an OOO slash command")
    if not command.complete:
        raise MissingDates("This OOO command does not contain identifiable dates")
    return command

# ───────────────────────── Run ─────────────────────────
def _apply(event: CommentEvent, command: OooCommandRange, settings: Settings, gateway, github) -> Outcome:
    header_values, login_values = gateway.read_header_and_logins()

    date_cells = map_date_row(header_values)
    # fresh mapper: one instance per column scan
    login_cells = LoginRowMapper().map_column(login_values)
    log.info("Date column cells: %s", date_cells)
    log.info("Login row cells: %s", login_cells)

    login = normalize_login(event.issue_author_login)
    targets = resolve_targets(date_cells, login_cells, login, command, event.issue_url)
    coords = [t.coord for t in targets]

    sheet_id, old_values = gateway.read_old_values(coords)
    log.info("Original values: %s", old_values)

    marker = MARKER_TEMPLATE.format(issue_url=event.issue_url)
    resp = gateway.write_marker(coords, marker)
    log.info("Update values response: %s", json.dumps(resp, default=str))

    log.info("Linked sheet range URL: %s", sheet_link(settings.spreadsheet_id, sheet_id, targets_range(targets)))
    body = render_reply(
        spreadsheet_id=settings.spreadsheet_id,
        sheet_id=sheet_id,
        commenter=event.commenter_login,
        marker=marker,
        targets=targets,
        old_values=old_values,
    )
    github.create_comment(event.issue_number, body)
    return Outcome.success("We did it!")

def run(
    payload: Dict[str, Any],
    settings: Settings,
    gateway_factory: Callable[[Settings], Any],
    github_factory: Callable[[Settings, Dict[str, Any]], Any],
) -> Outcome:
    """
    One issue_comment event → one Outcome. The Sheets gateway and the GitHub
    client are only built once the event has passed every pre-spreadsheet guard.
    """
    log.debug("Payload: %s", json.dumps(payload, default=str))
    event = CommentEvent.from_payload(payload)
    try:
        command = check_applicable(event)
        gateway = gateway_factory(settings)
        github = github_factory(settings, payload)
        return _apply(event, command, settings, gateway, github)
    except NotApplicable as e:
        log.info("Neutral: %s", e)
        return Outcome.neutral(str(e))
    except OooFailure as e:
        log.error("Failure: %s", e)
        return Outcome.failure(str(e))
    except Exception as e:
        log.exception("Unexpected error while handling %s", event.issue_url)
        return Outcome.failure(f"{type(e).__name__}: {e} (issue: {event.issue_url})")
