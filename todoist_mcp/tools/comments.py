"""MCP tool definitions for Todoist comments."""

import logging

from mcp.types import CallToolResult, ToolAnnotations

from todoist_mcp.client import get_client
from todoist_mcp.exceptions import TodoistError
from todoist_mcp.models.inputs import (
    CommentIdInput,
    CreateCommentInput,
    ListCommentsInput,
    UpdateCommentInput,
)
from todoist_mcp.server import mcp
from todoist_mcp.utils.parsers import _dump
from todoist_mcp.utils.responses import _error_response, _json_response, _success_response

logger = logging.getLogger(__name__)

MISSING_PARENT_MESSAGE = "Either taskId or projectId is required"


@mcp.tool(
    name="listComments",
    annotations=ToolAnnotations(
        title="List Comments",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def list_comments(params: ListCommentsInput) -> CallToolResult:
    """
    List the comments of a task or of a project.

    Pass exactly one of taskId or projectId. If both are given, the task's
    comments are returned.

    Returns:
        JSON object {"comments": [...]}
    """
    if not params.task_id and not params.project_id:
        return _error_response(MISSING_PARENT_MESSAGE)

    try:
        if params.task_id:
            comments = await get_client().get_comments(task_id=params.task_id)
        else:
            comments = await get_client().get_comments(project_id=params.project_id)
    except TodoistError as e:
        logger.error("Error fetching comments (task=%s, project=%s): %s", params.task_id, params.project_id, e)
        return _error_response("Failed to fetch comments")
    return _json_response({"comments": _dump(comments)})


@mcp.tool(
    name="getComment",
    annotations=ToolAnnotations(
        title="Get Comment",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def get_comment(params: CommentIdInput) -> CallToolResult:
    """Retrieve a comment by ID."""
    try:
        comment = await get_client().get_comment(params.comment_id)
    except TodoistError as e:
        logger.error("Error fetching comment %s: %s", params.comment_id, e)
        return _error_response("Failed to fetch comment")
    return _json_response({"comment": _dump(comment)})


@mcp.tool(
    name="createComment",
    annotations=ToolAnnotations(
        title="Create Comment",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def create_comment(params: CreateCommentInput) -> CallToolResult:
    """
    Add a comment to a task or a project, optionally with a file attachment.

    A comment belongs to exactly one parent: pass taskId or projectId. If both
    are given the comment goes on the task.

    Args:
        params: CreateCommentInput with content, taskId or projectId, and an
            optional attachment {fileUrl, fileName, fileType, resourceType}

    Returns:
        JSON object {"comment": {...}}

    Examples:
        - On a task: params with content="Called the shop", taskId="2995104339"
        - With a link: params with content="Floor plan", projectId="2203306141",
          attachment={"fileUrl": "https://example.com/floor-plan.pdf", "fileType": "application/pdf"}
    """
    if not params.task_id and not params.project_id:
        return _error_response(MISSING_PARENT_MESSAGE)

    fields = {"task_id": params.task_id} if params.task_id else {"project_id": params.project_id}
    if params.attachment is not None:
        fields["attachment"] = params.attachment.model_dump(mode="json", exclude_none=True)

    try:
        comment = await get_client().add_comment(params.content, **fields)
    except TodoistError as e:
        logger.error("Error creating comment (%s): %s", fields, e)
        return _error_response("Failed to create comment")
    return _json_response({"comment": _dump(comment)})


@mcp.tool(
    name="updateComment",
    annotations=ToolAnnotations(
        title="Update Comment",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def update_comment(params: UpdateCommentInput) -> CallToolResult:
    """Replace the text of a comment."""
    try:
        comment = await get_client().update_comment(params.comment_id, params.content)
    except TodoistError as e:
        logger.error("Error updating comment %s: %s", params.comment_id, e)
        return _error_response("Failed to update comment")
    return _json_response({"comment": _dump(comment)})


@mcp.tool(
    name="deleteComment",
    annotations=ToolAnnotations(
        title="Delete Comment",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def delete_comment(params: CommentIdInput) -> CallToolResult:
    """Delete a comment."""
    try:
        await get_client().delete_comment(params.comment_id)
    except TodoistError as e:
        logger.error("Error deleting comment %s: %s", params.comment_id, e)
        return _error_response("Failed to delete comment")
    return _success_response()
