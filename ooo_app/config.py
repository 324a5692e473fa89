from __future__ import annotations
import os
import re
from dataclasses import dataclass
from typing import Mapping

from .errors import ConfigError

# ===== command / issue matching =====
COMMAND_KEYWORD = "/ooo"
OOO_TITLE_KEYWORDS = ("ooo", "out of office")
BOT_USER_TYPE = "Bot"
HANDLED_EVENT = ("issue_comment", "created")

# ===== sheet writes =====
MARKER_TEMPLATE = '=HYPERLINK("{issue_url}", "OOO")'
SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
SHEET_URL_TEMPLATE = "https://docs.google.com/spreadsheets/d/{spreadsheet_id}/edit#gid={sheet_id}&range={a1}"

# ===== github =====
DEFAULT_GITHUB_API_URL = "https://api.github.com"
HTTP_TIMEOUT_SEC = 30

# ===== exit codes (actions toolkit convention) =====
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_NEUTRAL = 78

REQUIRED_NON_SECRET_ENV = ("SPREADSHEET_ID", "SHEET_NAME", "DATE_ROW", "LOGIN_COL")
REQUIRED_SECRET_ENV = ("GITHUB_TOKEN", "GOOGLE_API_CLIENT_EMAIL", "GOOGLE_API_PRIVATE_KEY")


@dataclass(frozen=True)
class Settings:
    """Run-time configuration loaded from environment variables."""

    spreadsheet_id: str
    sheet_name: str
    date_row: int
    login_col: str
    github_token: str
    google_client_email: str
    google_private_key: str
    github_api_url: str = DEFAULT_GITHUB_API_URL
    github_repository: str = ""

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if env is None else env
        missing = [k for k in REQUIRED_NON_SECRET_ENV + REQUIRED_SECRET_ENV if not (env.get(k) or "").strip()]
        if missing:
            raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

        raw_row = env["DATE_ROW"].strip()
        if not raw_row.isdigit() or int(raw_row) < 1:
            raise ConfigError(f"DATE_ROW must be a positive row number, got {raw_row!r}")
        login_col = env["LOGIN_COL"].strip().upper()
        if not re.fullmatch(r"[A-Z]+", login_col):
            raise ConfigError(f"LOGIN_COL must be a column letter (e.g. 'A'), got {env['LOGIN_COL']!r}")

        return cls(
            spreadsheet_id=env["SPREADSHEET_ID"].strip(),
            sheet_name=env["SHEET_NAME"],
            date_row=int(raw_row),
            login_col=login_col,
            github_token=env["GITHUB_TOKEN"].strip(),
            google_client_email=env["GOOGLE_API_CLIENT_EMAIL"].strip(),
            # keys pasted into CI secrets often carry literal "\n"
            google_private_key=env["GOOGLE_API_PRIVATE_KEY"].replace("\\n", "\n"),
            github_api_url=(env.get("GITHUB_API_URL") or DEFAULT_GITHUB_API_URL).rstrip("/"),
            github_repository=(env.get("GITHUB_REPOSITORY") or "").strip(),
        )
