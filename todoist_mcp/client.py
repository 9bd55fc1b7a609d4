"""
Async client for the Todoist REST API.

Every method performs exactly one HTTP round trip through ``_request``. There
are no retries: failures surface as ``TodoistError`` subclasses and the tool
handlers decide what to report.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from todoist_mcp.config import DEFAULT_BASE_URL, Settings, get_settings
from todoist_mcp.exceptions import (
    TodoistAPIError,
    TodoistConnectionError,
    TodoistRequestError,
    TodoistResponseError,
)
from todoist_mcp.models.entities import Collaborator, Comment, Label, Project, Section, Task
from todoist_mcp.utils.parsers import _parse_item, _parse_items

logger = logging.getLogger(__name__)

# Upstream error bodies are logged up to this many characters
MAX_LOGGED_BODY = 500


def _path(resource: str, entity_id: str, *action: str) -> str:
    """
    Build ``/<resource>/<entity_id>[/<action>]`` with the ID as one escaped segment.

    Slashes and other reserved characters in the ID are percent-encoded, so an
    ID can never address a different resource or action.

    Raises:
        TodoistRequestError: If the ID is empty or a dot segment
    """
    if entity_id in ("", ".", ".."):
        raise TodoistRequestError(f"Invalid {resource} ID: {entity_id!r}")
    return "/".join(("", resource, quote(entity_id, safe=""), *action))


class TodoistClient:
    """
    Thin wrapper around ``httpx.AsyncClient`` bound to one API token.

    Usage:
        client = TodoistClient(api_token="...")
        task = await client.add_task(content="Buy milk", priority=2)
        await client.aclose()
    """

    def __init__(
        self,
        api_token: str,
        base_url: str = DEFAULT_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=base_url,
            headers={"Authorization": f"Bearer {api_token}"},
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "TodoistClient":
        return cls(api_token=settings.api_token, base_url=settings.base_url)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Send one request and decode the response.

        Args:
            method: HTTP method
            path: Path relative to the API base URL (e.g. "/tasks/123/close")
            json: Optional JSON body
            params: Optional query-string parameters

        Returns:
            Decoded JSON body, or None when the response has no body

        Raises:
            TodoistRequestError: The URL could not be built
            TodoistConnectionError: The request never got a response
            TodoistAPIError: The API answered with a non-2xx status
            TodoistResponseError: The body was not valid JSON
        """
        logger.debug("%s %s params=%s", method, path, params)
        try:
            response = await self._http.request(method, path, json=json, params=params)
        except httpx.InvalidURL as e:
            raise TodoistRequestError(f"{method} {path} is not a valid request: {e}") from e
        except httpx.HTTPError as e:
            raise TodoistConnectionError(f"{method} {path} failed: {type(e).__name__}: {e}") from e

        if response.is_error:
            logger.debug(
                "%s %s answered %s: %s",
                method,
                path,
                response.status_code,
                response.text[:MAX_LOGGED_BODY],
            )
            raise TodoistAPIError(response.status_code, response.reason_phrase, response.text)

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise TodoistResponseError(f"{method} {path} returned a non-JSON body") from e

    # =========================================================================
    # Tasks
    # =========================================================================

    async def get_tasks(self, **filters: Any) -> list[Task]:
        """List active tasks. Accepts project_id, section_id, label, filter, lang and ids."""
        if "ids" in filters:
            filters["ids"] = ",".join(filters["ids"])
        data = await self._request("GET", "/tasks", params=filters or None)
        return _parse_items(Task, data)

    async def get_task(self, task_id: str) -> Task:
        return _parse_item(Task, await self._request("GET", _path("tasks", task_id)))

    async def add_task(self, content: str, **fields: Any) -> Task:
        data = await self._request("POST", "/tasks", json={"content": content, **fields})
        return _parse_item(Task, data)

    async def update_task(self, task_id: str, **fields: Any) -> Task:
        data = await self._request("POST", _path("tasks", task_id), json=fields)
        return _parse_item(Task, data)

    async def close_task(self, task_id: str) -> bool:
        await self._request("POST", _path("tasks", task_id, "close"))
        return True

    async def reopen_task(self, task_id: str) -> bool:
        await self._request("POST", _path("tasks", task_id, "reopen"))
        return True

    async def delete_task(self, task_id: str) -> bool:
        await self._request("DELETE", _path("tasks", task_id))
        return True

    # =========================================================================
    # Projects
    # =========================================================================

    async def get_projects(self) -> list[Project]:
        return _parse_items(Project, await self._request("GET", "/projects"))

    async def get_project(self, project_id: str) -> Project:
        return _parse_item(Project, await self._request("GET", _path("projects", project_id)))

    async def add_project(self, name: str, **fields: Any) -> Project:
        data = await self._request("POST", "/projects", json={"name": name, **fields})
        return _parse_item(Project, data)

    async def update_project(self, project_id: str, **fields: Any) -> Project:
        data = await self._request("POST", _path("projects", project_id), json=fields)
        return _parse_item(Project, data)

    async def archive_project(self, project_id: str) -> bool:
        await self._request("POST", _path("projects", project_id, "archive"))
        return True

    async def unarchive_project(self, project_id: str) -> bool:
        await self._request("POST", _path("projects", project_id, "unarchive"))
        return True

    async def delete_project(self, project_id: str) -> bool:
        await self._request("DELETE", _path("projects", project_id))
        return True

    async def get_project_collaborators(self, project_id: str) -> list[Collaborator]:
        data = await self._request("GET", _path("projects", project_id, "collaborators"))
        return _parse_items(Collaborator, data)

    # =========================================================================
    # Sections
    # =========================================================================

    async def get_sections(self, project_id: str) -> list[Section]:
        data = await self._request("GET", "/sections", params={"project_id": project_id})
        return _parse_items(Section, data)

    async def get_section(self, section_id: str) -> Section:
        return _parse_item(Section, await self._request("GET", _path("sections", section_id)))

    async def add_section(self, name: str, project_id: str, **fields: Any) -> Section:
        data = await self._request("POST", "/sections", json={"name": name, "project_id": project_id, **fields})
        return _parse_item(Section, data)

    async def update_section(self, section_id: str, name: str) -> Section:
        data = await self._request("POST", _path("sections", section_id), json={"name": name})
        return _parse_item(Section, data)

    async def delete_section(self, section_id: str) -> bool:
        await self._request("DELETE", _path("sections", section_id))
        return True

    # =========================================================================
    # Comments
    # =========================================================================

    async def get_comments(self, *, task_id: str | None = None, project_id: str | None = None) -> list[Comment]:
        """List comments of a task or a project. task_id wins when both are passed."""
        if task_id:
            params = {"task_id": task_id}
        elif project_id:
            params = {"project_id": project_id}
        else:
            raise ValueError("Either task_id or project_id is required")
        return _parse_items(Comment, await self._request("GET", "/comments", params=params))

    async def get_comment(self, comment_id: str) -> Comment:
        return _parse_item(Comment, await self._request("GET", _path("comments", comment_id)))

    async def add_comment(self, content: str, **fields: Any) -> Comment:
        data = await self._request("POST", "/comments", json={"content": content, **fields})
        return _parse_item(Comment, data)

    async def update_comment(self, comment_id: str, content: str) -> Comment:
        data = await self._request("POST", _path("comments", comment_id), json={"content": content})
        return _parse_item(Comment, data)

    async def delete_comment(self, comment_id: str) -> bool:
        await self._request("DELETE", _path("comments", comment_id))
        return True

    # =========================================================================
    # Labels
    # =========================================================================

    async def get_labels(self) -> list[Label]:
        return _parse_items(Label, await self._request("GET", "/labels"))

    async def get_label(self, label_id: str) -> Label:
        return _parse_item(Label, await self._request("GET", _path("labels", label_id)))

    async def add_label(self, name: str, **fields: Any) -> Label:
        data = await self._request("POST", "/labels", json={"name": name, **fields})
        return _parse_item(Label, data)

    async def update_label(self, label_id: str, **fields: Any) -> Label:
        data = await self._request("POST", _path("labels", label_id), json=fields)
        return _parse_item(Label, data)

    async def delete_label(self, label_id: str) -> bool:
        await self._request("DELETE", _path("labels", label_id))
        return True

    async def get_shared_labels(self, omit_personal: bool = False) -> list[str]:
        params = {"omit_personal": "true"} if omit_personal else None
        data = await self._request("GET", "/labels/shared", params=params)
        if not isinstance(data, list):
            raise TodoistResponseError(f"Expected a list of label names, got {type(data).__name__}")
        return [str(name) for name in data]

    async def rename_shared_label(self, name: str, new_name: str) -> bool:
        await self._request("POST", "/labels/shared/rename", json={"name": name, "new_name": new_name})
        return True

    async def remove_shared_label(self, name: str) -> bool:
        await self._request("POST", "/labels/shared/remove", json={"name": name})
        return True


# Process-wide client, installed at startup
_client: TodoistClient | None = None


def get_client() -> TodoistClient:
    """Return the shared client, creating it from the environment on first use."""
    global _client
    if _client is None:
        _client = TodoistClient.from_settings(get_settings())
    return _client


def set_client(client: TodoistClient | None) -> None:
    """Install (or with None, forget) the shared client."""
    global _client
    _client = client
