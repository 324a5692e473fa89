from __future__ import annotations
import json
import logging
import os
from typing import Any, Dict, Tuple

import requests

from .config import HTTP_TIMEOUT_SEC, Settings

log = logging.getLogger(__name__)

def load_event(path: str | None = None) -> Tuple[str, Dict[str, Any]]:
    """(event name, payload) for the workflow run that started us."""
    name = os.environ.get("GITHUB_EVENT_NAME", "")
    path = path or os.environ.get("GITHUB_EVENT_PATH", "")
    if not path:
        raise RuntimeError("GITHUB_EVENT_PATH is not set; run this inside a GitHub Actions workflow.")
    with open(path, "r", encoding="utf-8") as f:
        return name, json.load(f)


class GitHubClient:
    def __init__(self, settings: Settings, repository: str, session: requests.Session | None = None):
        self.api_url = settings.github_api_url
        self.repository = repository
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {settings.github_token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        })

    @classmethod
    def for_payload(cls, settings: Settings, payload: Dict[str, Any]) -> "GitHubClient":
        repo = settings.github_repository or ((payload.get("repository") or {}).get("full_name") or "")
        if not repo:
            raise RuntimeError("Cannot tell which repository to comment on (GITHUB_REPOSITORY is empty).")
        return cls(settings, repo)

    def create_comment(self, issue_number: int, body: str) -> Dict[str, Any]:
        url = f"{self.api_url}/repos/{self.repository}/issues/{issue_number}/comments"
        resp = self.session.post(url, json={"body": body}, timeout=HTTP_TIMEOUT_SEC)
        resp.raise_for_status()
        data = resp.json()
        log.info("Posted comment %s", data.get("html_url"))
        return data
