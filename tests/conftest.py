"""Pytest configuration and fixtures for todoist-mcp tests."""

import json
from typing import Any

import httpx
import pytest

from todoist_mcp.client import TodoistClient, set_client

TEST_TOKEN = "test-token-0123456789"
API_PREFIX = "/rest/v2"


def _raw_path(request: httpx.Request) -> str:
    """Request path relative to the API base, still percent-encoded."""
    raw = request.url.raw_path.split(b"?", 1)[0].decode("ascii")
    return raw.removeprefix(API_PREFIX)


class FakeTodoistAPI:
    """Records every request and answers from a table of canned responses.

    Routes are keyed by (method, path) where path is relative to the API base,
    as sent on the wire, e.g. ("POST", "/tasks") or ("GET", "/tasks/1%2Fclose").
    Unknown routes answer 404.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], tuple[int, Any]] = {}
        self.error: Exception | None = None

    def add(self, method: str, path: str, json_body: Any = None, status_code: int = 200) -> None:
        self.routes[(method, path)] = (status_code, json_body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        path = _raw_path(request)
        if (request.method, path) not in self.routes:
            return httpx.Response(404, text="Not found")
        status_code, body = self.routes[(request.method, path)]
        if body is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)

    def last_path(self) -> str:
        return _raw_path(self.last_request)


@pytest.fixture
def fake_api():
    """Install a TodoistClient whose HTTP traffic goes to a FakeTodoistAPI."""
    api = FakeTodoistAPI()
    client = TodoistClient(api_token=TEST_TOKEN, transport=httpx.MockTransport(api.handler))
    set_client(client)
    yield api
    set_client(None)


@pytest.fixture
def sample_task():
    return {
        "id": "2995104339",
        "content": "Buy milk",
        "description": "",
        "project_id": "2203306141",
        "section_id": None,
        "parent_id": None,
        "order": 1,
        "priority": 2,
        "labels": ["errands"],
        "due": {
            "string": "tomorrow",
            "date": "2026-10-19",
            "is_recurring": False,
            "lang": "en",
        },
        "assignee_id": None,
        "comment_count": 0,
        "is_completed": False,
        "created_at": "2026-10-18T09:00:00.000000Z",
        "url": "https://todoist.com/showTask?id=2995104339",
    }


@pytest.fixture
def sample_project():
    return {
        "id": "2203306141",
        "name": "Shopping List",
        "parent_id": None,
        "color": "charcoal",
        "order": 1,
        "comment_count": 0,
        "is_shared": False,
        "is_favorite": False,
        "is_inbox_project": False,
        "is_team_inbox": False,
        "view_style": "list",
        "url": "https://todoist.com/showProject?id=2203306141",
    }


@pytest.fixture
def sample_section():
    return {"id": "7025", "project_id": "2203306141", "order": 1, "name": "Groceries"}


@pytest.fixture
def sample_comment():
    return {
        "id": "2992679862",
        "task_id": "2995104339",
        "project_id": None,
        "posted_at": "2026-10-18T09:30:00.000000Z",
        "content": "Need one bottle of milk",
        "attachment": {
            "file_name": "File.pdf",
            "file_type": "application/pdf",
            "file_url": "https://cdn-domain.tld/path/to/file.pdf",
            "resource_type": "file",
        },
    }


@pytest.fixture
def sample_label():
    return {"id": "2156154810", "name": "Food", "color": "charcoal", "order": 1, "is_favorite": False}
