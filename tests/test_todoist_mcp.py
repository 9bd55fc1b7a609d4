"""Tests for models, helpers, configuration and the Todoist client."""

import json
import logging

import httpx
import pytest
from pydantic import ValidationError

from todoist_mcp import (
    AttachmentInput,
    CreateCommentInput,
    CreateProjectInput,
    CreateTaskInput,
    ListTasksInput,
    Settings,
    TodoistAPIError,
    TodoistClient,
    TodoistConfigurationError,
    TodoistConnectionError,
    TodoistRequestError,
    TodoistResponseError,
    UpdateLabelInput,
    UpdateTaskInput,
    ViewStyle,
    get_client,
    get_settings,
    set_client,
)
from todoist_mcp.models import Due, Project, Task
from todoist_mcp.utils import (
    _apply_due_precedence,
    _build_payload,
    _dump,
    _error_response,
    _json_response,
    _parse_item,
    _parse_items,
    _success_response,
)

TEST_TOKEN = "test-token-0123456789"

# ============================================================================
# Input Model Tests
# ============================================================================


class TestInputModels:
    """Tests for Pydantic input models."""

    def test_create_task_input_required(self):
        """Test CreateTaskInput with only required fields."""
        params = CreateTaskInput(content="Buy milk")
        assert params.content == "Buy milk"
        assert params.priority is None
        assert params.due_string is None
        assert params.model_fields_set == {"content"}

    def test_create_task_input_accepts_camel_case(self):
        """Test that tool arguments use camelCase names."""
        params = CreateTaskInput.model_validate(
            {"content": "Buy milk", "projectId": "2203306141", "dueString": "tomorrow"}
        )
        assert params.project_id == "2203306141"
        assert params.due_string == "tomorrow"

    def test_create_task_input_strips_whitespace(self):
        params = CreateTaskInput(content="  Buy milk  ")
        assert params.content == "Buy milk"

    def test_create_task_input_empty_content_fails(self):
        with pytest.raises(ValidationError):
            CreateTaskInput(content="")
        with pytest.raises(ValidationError):
            CreateTaskInput(content="   ")

    def test_create_task_input_missing_content_fails(self):
        with pytest.raises(ValidationError):
            CreateTaskInput.model_validate({})

    @pytest.mark.parametrize("priority", [0, 5, -1])
    def test_priority_out_of_range_fails(self, priority):
        with pytest.raises(ValidationError):
            CreateTaskInput(content="Buy milk", priority=priority)

    def test_unknown_field_rejected(self):
        """Test that unexpected arguments are refused rather than ignored."""
        with pytest.raises(ValidationError):
            CreateTaskInput.model_validate({"content": "Buy milk", "dueWhen": "soon"})

    def test_update_task_input_requires_task_id(self):
        with pytest.raises(ValidationError):
            UpdateTaskInput.model_validate({"content": "Renamed"})

    def test_list_tasks_ids_cannot_be_empty(self):
        with pytest.raises(ValidationError):
            ListTasksInput(ids=[])

    def test_project_view_style(self):
        params = CreateProjectInput(name="Sprint", view_style="board")
        assert params.view_style == ViewStyle.BOARD
        with pytest.raises(ValidationError):
            CreateProjectInput(name="Sprint", view_style="calendar")

    def test_attachment_requires_file_url(self):
        with pytest.raises(ValidationError):
            AttachmentInput.model_validate({"fileName": "receipt.pdf"})

    def test_create_comment_nested_attachment(self):
        params = CreateCommentInput.model_validate(
            {"content": "See file", "taskId": "1", "attachment": {"fileUrl": "https://x.test/a.pdf"}}
        )
        assert params.attachment is not None
        assert params.attachment.file_url == "https://x.test/a.pdf"


# ============================================================================
# Payload Builder Tests
# ============================================================================


class TestBuildPayload:
    """Tests for the optional-field payload builder."""

    def test_only_supplied_fields(self):
        params = CreateTaskInput(content="Buy milk", priority=2)
        assert _build_payload(params) == {"content": "Buy milk", "priority": 2}

    def test_exclude(self):
        params = UpdateLabelInput(label_id="42", color="red")
        assert _build_payload(params, exclude={"label_id"}) == {"color": "red"}

    def test_explicit_null_dropped_by_default(self):
        params = UpdateTaskInput(task_id="1", content=None, description="Notes")
        assert _build_payload(params, exclude={"task_id"}) == {"description": "Notes"}

    def test_explicit_null_kept_for_clearable_fields(self):
        params = UpdateTaskInput(task_id="1", assignee_id=None)
        payload = _build_payload(params, exclude={"task_id"}, clearable=frozenset({"assignee_id"}))
        assert payload == {"assignee_id": None}

    def test_omitted_clearable_field_absent(self):
        params = UpdateTaskInput(task_id="1", content="Renamed")
        payload = _build_payload(params, exclude={"task_id"}, clearable=frozenset({"assignee_id"}))
        assert "assignee_id" not in payload

    def test_enum_serialized_as_value(self):
        params = CreateProjectInput(name="Sprint", view_style=ViewStyle.BOARD)
        assert _build_payload(params, exclude={"name"}) == {"view_style": "board"}

    def test_false_is_kept(self):
        params = UpdateLabelInput(label_id="42", is_favorite=False)
        assert _build_payload(params, exclude={"label_id"}) == {"is_favorite": False}


class TestDuePrecedence:
    """Tests for the due-field precedence rule."""

    def test_string_wins(self):
        payload = {"due_string": "tomorrow", "due_date": "2026-10-19", "due_datetime": "2026-10-19T10:00:00Z"}
        assert _apply_due_precedence(payload) == {"due_string": "tomorrow"}

    def test_date_beats_datetime(self):
        payload = {"due_date": "2026-10-19", "due_datetime": "2026-10-19T10:00:00Z"}
        assert _apply_due_precedence(payload) == {"due_date": "2026-10-19"}

    def test_datetime_alone(self):
        payload = {"due_datetime": "2026-10-19T10:00:00Z"}
        assert _apply_due_precedence(payload) == {"due_datetime": "2026-10-19T10:00:00Z"}

    def test_other_fields_untouched(self):
        payload = {"content": "x", "due_lang": "de", "due_date": "2026-10-19"}
        assert _apply_due_precedence(payload) == {"content": "x", "due_lang": "de", "due_date": "2026-10-19"}

    def test_no_due_fields(self):
        assert _apply_due_precedence({"content": "x"}) == {"content": "x"}


# ============================================================================
# Parser and Envelope Tests
# ============================================================================


class TestParsers:
    """Tests for response parsing helpers."""

    def test_parse_task(self, sample_task):
        task = _parse_item(Task, sample_task)
        assert task.id == "2995104339"
        assert isinstance(task.due, Due)
        assert task.due.string == "tomorrow"

    def test_unknown_fields_preserved(self, sample_task):
        sample_task["duration"] = {"amount": 15, "unit": "minute"}
        task = _parse_item(Task, sample_task)
        assert _dump(task)["duration"] == {"amount": 15, "unit": "minute"}

    def test_dump_round_trips_upstream_fields(self, sample_project):
        project = _parse_item(Project, sample_project)
        assert _dump(project) == sample_project
        assert "is_archived" not in _dump(project)

    def test_parse_items_requires_list(self):
        with pytest.raises(TodoistResponseError):
            _parse_items(Task, {"id": "1"})

    def test_parse_item_missing_id(self):
        with pytest.raises(TodoistResponseError):
            _parse_item(Task, {"content": "no id"})


class TestResponses:
    """Tests for the tool result envelope."""

    def test_json_response(self):
        result = _json_response({"task": {"id": "1"}})
        assert result.isError is False
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert json.loads(result.content[0].text) == {"task": {"id": "1"}}
        assert result.content[0].text == json.dumps({"task": {"id": "1"}}, indent=2)

    def test_success_response(self):
        assert json.loads(_success_response().content[0].text) == {"success": True}

    def test_error_response(self):
        result = _error_response("Failed to fetch task")
        assert result.isError is True
        assert result.content[0].text == "Failed to fetch task"


# ============================================================================
# Configuration Tests
# ============================================================================


class TestSettings:
    """Tests for environment configuration."""

    @pytest.fixture(autouse=True)
    def no_dotenv(self, monkeypatch):
        monkeypatch.setattr("todoist_mcp.config.load_dotenv", lambda: False)

    def test_reads_token(self, monkeypatch):
        monkeypatch.setenv("TODOIST_API_TOKEN", "abc123")
        monkeypatch.delenv("TODOIST_API_BASE_URL", raising=False)
        settings = get_settings()
        assert settings.api_token == "abc123"
        assert settings.base_url == "https://api.todoist.com/rest/v2"
        assert settings.log_level == "INFO"

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("TODOIST_API_TOKEN", "abc123")
        monkeypatch.setenv("TODOIST_API_BASE_URL", "http://localhost:8080/rest/v2")
        monkeypatch.setenv("TODOIST_MCP_LOG_LEVEL", "DEBUG")
        settings = get_settings()
        assert settings.base_url == "http://localhost:8080/rest/v2"
        assert settings.log_level == "DEBUG"

    def test_missing_token(self, monkeypatch):
        monkeypatch.delenv("TODOIST_API_TOKEN", raising=False)
        with pytest.raises(TodoistConfigurationError, match="TODOIST_API_TOKEN"):
            get_settings()

    def test_blank_token(self, monkeypatch):
        monkeypatch.setenv("TODOIST_API_TOKEN", "   ")
        with pytest.raises(TodoistConfigurationError):
            get_settings()

    def test_settings_are_immutable(self):
        settings = Settings(api_token="abc123")
        with pytest.raises(ValidationError):
            settings.api_token = "other"

    def test_get_client_builds_from_environment(self, monkeypatch):
        monkeypatch.setenv("TODOIST_API_TOKEN", "abc123")
        set_client(None)
        try:
            client = get_client()
            assert isinstance(client, TodoistClient)
            assert get_client() is client
        finally:
            set_client(None)

    def test_get_client_without_token(self, monkeypatch):
        monkeypatch.delenv("TODOIST_API_TOKEN", raising=False)
        set_client(None)
        with pytest.raises(TodoistConfigurationError):
            get_client()


# ============================================================================
# Client Tests
# ============================================================================


def _client_returning(response: httpx.Response) -> TodoistClient:
    return TodoistClient(api_token=TEST_TOKEN, transport=httpx.MockTransport(lambda request: response))


class TestTodoistClient:
    """Tests for TodoistClient request handling."""

    @pytest.mark.asyncio
    async def test_bearer_token_header(self, fake_api, sample_task):
        fake_api.add("GET", "/tasks/2995104339", sample_task)
        await get_client().get_task("2995104339")
        assert fake_api.last_request.headers["Authorization"] == f"Bearer {TEST_TOKEN}"
        assert str(fake_api.last_request.url) == "https://api.todoist.com/rest/v2/tasks/2995104339"

    @pytest.mark.asyncio
    async def test_custom_base_url(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=[])

        client = TodoistClient(
            api_token=TEST_TOKEN,
            base_url="http://localhost:8080/rest/v2",
            transport=httpx.MockTransport(handler),
        )
        await client.get_projects()
        assert str(seen[0].url) == "http://localhost:8080/rest/v2/projects"

    @pytest.mark.asyncio
    async def test_non_success_status_raises(self):
        client = _client_returning(httpx.Response(403, text="Forbidden"))
        with pytest.raises(TodoistAPIError) as exc_info:
            await client.get_labels()
        assert exc_info.value.status_code == 403
        assert "403 Forbidden" in str(exc_info.value)
        assert exc_info.value.body == "Forbidden"

    @pytest.mark.asyncio
    async def test_transport_error_raises(self, fake_api):
        fake_api.error = httpx.ConnectError("connection refused")
        with pytest.raises(TodoistConnectionError, match="connection refused"):
            await get_client().get_projects()
        assert len(fake_api.requests) == 1

    @pytest.mark.asyncio
    async def test_non_json_body_raises(self):
        client = _client_returning(httpx.Response(200, text="<html>maintenance</html>"))
        with pytest.raises(TodoistResponseError):
            await client.get_projects()

    @pytest.mark.asyncio
    async def test_no_content_returns_true(self, fake_api):
        fake_api.add("POST", "/tasks/1/close", status_code=204)
        assert await get_client().close_task("1") is True

    @pytest.mark.asyncio
    async def test_no_retry_on_server_error(self, fake_api):
        fake_api.add("GET", "/projects", {"error": "boom"}, status_code=503)
        with pytest.raises(TodoistAPIError):
            await get_client().get_projects()
        assert len(fake_api.requests) == 1

    @pytest.mark.asyncio
    async def test_get_tasks_joins_ids(self, fake_api):
        fake_api.add("GET", "/tasks", [])
        await get_client().get_tasks(ids=["1", "2"])
        assert fake_api.last_request.url.params["ids"] == "1,2"

    @pytest.mark.asyncio
    async def test_get_comments_needs_parent(self, fake_api):
        with pytest.raises(ValueError):
            await get_client().get_comments()
        assert fake_api.requests == []

    @pytest.mark.asyncio
    async def test_shared_labels_must_be_list(self):
        client = _client_returning(httpx.Response(200, json={"labels": []}))
        with pytest.raises(TodoistResponseError):
            await client.get_shared_labels()

    @pytest.mark.asyncio
    async def test_aclose(self):
        client = _client_returning(httpx.Response(200, json=[]))
        await client.aclose()
        with pytest.raises(RuntimeError):
            await client._http.get("/projects")

    @pytest.mark.asyncio
    async def test_id_is_one_escaped_path_segment(self, fake_api):
        await get_client().get_task("1/close")
        assert fake_api.last_request.method == "GET"
        assert fake_api.last_path() == "/tasks/1%2Fclose"

    @pytest.mark.asyncio
    async def test_id_cannot_climb_to_another_resource(self, fake_api):
        fake_api.add("DELETE", "/projects/5", status_code=204)
        with pytest.raises(TodoistAPIError):
            await get_client().delete_task("../projects/5")
        assert fake_api.last_path() == "/tasks/..%2Fprojects%2F5"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("task_id", ["..", "."])
    async def test_dot_segment_ids_rejected(self, fake_api, task_id):
        with pytest.raises(TodoistRequestError):
            await get_client().delete_task(task_id)
        assert fake_api.requests == []

    @pytest.mark.asyncio
    async def test_control_characters_are_escaped(self, fake_api):
        with pytest.raises(TodoistAPIError):
            await get_client().get_task("12\x01")
        assert fake_api.last_path() == "/tasks/12%01"

    @pytest.mark.asyncio
    async def test_invalid_url_raises_request_error(self, fake_api):
        fake_api.error = httpx.InvalidURL("Invalid non-printable ASCII character in URL")
        with pytest.raises(TodoistRequestError, match="non-printable"):
            await get_client().get_projects()

    @pytest.mark.asyncio
    async def test_error_body_logged_at_debug(self, caplog):
        client = _client_returning(httpx.Response(400, text="Invalid argument value: priority"))
        with caplog.at_level(logging.DEBUG, logger="todoist_mcp.client"):
            with pytest.raises(TodoistAPIError):
                await client.update_task("1", priority=9)
        assert "Invalid argument value: priority" in caplog.text

    @pytest.mark.asyncio
    async def test_logged_error_body_is_truncated(self, caplog):
        client = _client_returning(httpx.Response(500, text="x" * 2000))
        with caplog.at_level(logging.DEBUG, logger="todoist_mcp.client"):
            with pytest.raises(TodoistAPIError):
                await client.get_labels()
        assert "x" * 500 in caplog.text
        assert "x" * 501 not in caplog.text
