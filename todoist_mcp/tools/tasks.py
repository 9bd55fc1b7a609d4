"""MCP tool definitions for Todoist tasks."""

import logging

from mcp.types import CallToolResult, ToolAnnotations

from todoist_mcp.client import get_client
from todoist_mcp.exceptions import TodoistError
from todoist_mcp.models.inputs import (
    CreateTaskInput,
    GetTaskInput,
    ListTasksInput,
    TaskIdInput,
    UpdateTaskInput,
)
from todoist_mcp.server import mcp
from todoist_mcp.utils.parsers import _dump
from todoist_mcp.utils.payloads import _apply_due_precedence, _build_payload
from todoist_mcp.utils.responses import _error_response, _json_response, _success_response

logger = logging.getLogger(__name__)


@mcp.tool(
    name="listTasks",
    annotations=ToolAnnotations(
        title="List Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def list_tasks(params: ListTasksInput) -> CallToolResult:
    """
    List active (uncompleted) Todoist tasks.

    USE THIS WHEN:
    - Looking for tasks in a project, section or with a label
    - Running a Todoist filter query ("today | overdue", "#Work & p1")

    DO NOT USE WHEN:
    - You already know the task ID → use getTask instead

    Args:
        params: ListTasksInput with optional projectId, sectionId, label, filter, lang, ids

    Returns:
        JSON object {"tasks": [...]}

    Examples:
        - Tasks due today: params with filter="today"
        - Tasks in a project: params with projectId="2203306141"
    """
    filters = _build_payload(params)
    try:
        tasks = await get_client().get_tasks(**filters)
    except TodoistError as e:
        logger.error("Error fetching tasks (filters=%s): %s", filters, e)
        return _error_response("Failed to fetch tasks")
    return _json_response({"tasks": _dump(tasks)})


@mcp.tool(
    name="getTask",
    annotations=ToolAnnotations(
        title="Get Task",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def get_task(params: GetTaskInput) -> CallToolResult:
    """
    Retrieve a single active task by ID.

    Returns:
        JSON object {"task": {...}}
    """
    try:
        task = await get_client().get_task(params.task_id)
    except TodoistError as e:
        logger.error("Error fetching task %s: %s", params.task_id, e)
        return _error_response("Failed to fetch task")
    return _json_response({"task": _dump(task)})


@mcp.tool(
    name="createTask",
    annotations=ToolAnnotations(
        title="Create Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def create_task(params: CreateTaskInput) -> CallToolResult:
    """
    Create a new task.

    Only the parameters you provide are sent. Give at most one way of setting
    the due date; if several are passed, dueString wins over dueDate, which wins
    over dueDatetime.

    Args:
        params: CreateTaskInput with content (required) and optional attributes

    Returns:
        JSON object {"task": {...}} describing the created task

    Examples:
        - Simple task: params with content="Buy milk"
        - With priority: params with content="Buy milk", priority=2
        - Recurring: params with content="Water plants", dueString="every monday"
        - Sub-task: params with content="Draft intro", parentId="2995104339"
    """
    payload = _apply_due_precedence(_build_payload(params, exclude={"content"}))
    try:
        task = await get_client().add_task(params.content, **payload)
    except TodoistError as e:
        logger.error("Error creating task: %s", e)
        return _error_response("Failed to create task")
    return _json_response({"task": _dump(task)})


@mcp.tool(
    name="updateTask",
    annotations=ToolAnnotations(
        title="Update Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def update_task(params: UpdateTaskInput) -> CallToolResult:
    """
    Update an existing task.

    Fields you leave out are not touched. To clear the due date pass
    dueString="no date"; to unassign pass assigneeId=null.

    Args:
        params: UpdateTaskInput with taskId and the fields to change

    Returns:
        JSON object {"task": {...}} with the updated task

    Examples:
        - Rename: params with taskId="2995104339", content="Buy oat milk"
        - Reschedule: params with taskId="2995104339", dueString="next friday"
    """
    payload = _apply_due_precedence(
        _build_payload(params, exclude={"task_id"}, clearable=frozenset({"assignee_id"}))
    )
    try:
        task = await get_client().update_task(params.task_id, **payload)
    except TodoistError as e:
        logger.error("Error updating task %s: %s", params.task_id, e)
        return _error_response("Failed to update task")
    return _json_response({"task": _dump(task)})


@mcp.tool(
    name="completeTask",
    annotations=ToolAnnotations(
        title="Complete Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def complete_task(params: TaskIdInput) -> CallToolResult:
    """
    Mark a task as completed. Recurring tasks move to their next occurrence.

    Returns:
        {"success": true}
    """
    try:
        await get_client().close_task(params.task_id)
    except TodoistError as e:
        logger.error("Error completing task %s: %s", params.task_id, e)
        return _error_response("Failed to complete task")
    return _success_response()


@mcp.tool(
    name="reopenTask",
    annotations=ToolAnnotations(
        title="Reopen Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def reopen_task(params: TaskIdInput) -> CallToolResult:
    """Reopen a completed task."""
    try:
        await get_client().reopen_task(params.task_id)
    except TodoistError as e:
        logger.error("Error reopening task %s: %s", params.task_id, e)
        return _error_response("Failed to reopen task")
    return _success_response()


@mcp.tool(
    name="deleteTask",
    annotations=ToolAnnotations(
        title="Delete Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def delete_task(params: TaskIdInput) -> CallToolResult:
    """
    Permanently delete a task and its sub-tasks.

    This cannot be undone. Use completeTask if the task was simply finished.
    """
    try:
        await get_client().delete_task(params.task_id)
    except TodoistError as e:
        logger.error("Error deleting task %s: %s", params.task_id, e)
        return _error_response("Failed to delete task")
    return _success_response()
