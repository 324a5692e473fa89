"""
Tests for the GitHub collaborator.
"""

import json
from unittest.mock import MagicMock

import pytest
import requests

from ooo_app.github import GitHubClient, load_event


@pytest.fixture
def session():
    s = MagicMock()
    s.headers = {}
    s.post.return_value.json.return_value = {"html_url": "https://github.com/acme/services/issues/7#issuecomment-1"}
    return s


class TestCreateComment:
    def test_posts_to_issue(self, settings, session) -> None:
        client = GitHubClient(settings, "acme/services", session=session)
        data = client.create_comment(7, "hello")

        session.post.assert_called_once_with(
            "https://api.github.com/repos/acme/services/issues/7/comments",
            json={"body": "hello"},
            timeout=30,
        )
        assert session.headers["Authorization"] == "Bearer ghs_test"
        assert data["html_url"].endswith("#issuecomment-1")

    def test_http_error_propagates(self, settings, session) -> None:
        session.post.return_value.raise_for_status.side_effect = requests.HTTPError("403 Forbidden")
        with pytest.raises(requests.HTTPError):
            GitHubClient(settings, "acme/services", session=session).create_comment(7, "hello")

    def test_repository_from_payload(self, settings) -> None:
        from dataclasses import replace

        client = GitHubClient.for_payload(replace(settings, github_repository=""), {"repository": {"full_name": "acme/other"}})
        assert client.repository == "acme/other"

    def test_no_repository(self, settings) -> None:
        from dataclasses import replace

        with pytest.raises(RuntimeError):
            GitHubClient.for_payload(replace(settings, github_repository=""), {})


class TestLoadEvent:
    def test_reads_payload(self, tmp_path, monkeypatch) -> None:
        path = tmp_path / "event.json"
        path.write_text(json.dumps({"action": "created"}), encoding="utf-8")
        monkeypatch.setenv("GITHUB_EVENT_NAME", "issue_comment")

        assert load_event(str(path)) == ("issue_comment", {"action": "created"})

    def test_requires_a_path(self, monkeypatch) -> None:
        monkeypatch.delenv("GITHUB_EVENT_PATH", raising=False)
        with pytest.raises(RuntimeError):
            load_event()
