"""MCP tool definitions for personal and shared Todoist labels."""

import logging

from mcp.types import CallToolResult, ToolAnnotations

from todoist_mcp.client import get_client
from todoist_mcp.exceptions import TodoistError
from todoist_mcp.models.inputs import (
    CreateLabelInput,
    LabelIdInput,
    ListLabelsInput,
    RemoveSharedLabelInput,
    RenameSharedLabelInput,
    SharedLabelsInput,
    UpdateLabelInput,
)
from todoist_mcp.server import mcp
from todoist_mcp.utils.parsers import _dump
from todoist_mcp.utils.payloads import _build_payload
from todoist_mcp.utils.responses import _error_response, _json_response, _success_response

logger = logging.getLogger(__name__)


# ============================================================================
# Personal labels
# ============================================================================


@mcp.tool(
    name="listLabels",
    annotations=ToolAnnotations(
        title="List Labels",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def list_labels(params: ListLabelsInput) -> CallToolResult:
    """
    List the user's personal labels.

    Labels that only appear on tasks shared by others are not included; see
    getSharedLabels for those.

    Returns:
        JSON object {"labels": [...]}
    """
    try:
        labels = await get_client().get_labels()
    except TodoistError as e:
        logger.error("Error fetching labels: %s", e)
        return _error_response("Failed to fetch labels")
    return _json_response({"labels": _dump(labels)})


@mcp.tool(
    name="getLabel",
    annotations=ToolAnnotations(
        title="Get Label",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def get_label(params: LabelIdInput) -> CallToolResult:
    """Retrieve a personal label by ID."""
    try:
        label = await get_client().get_label(params.label_id)
    except TodoistError as e:
        logger.error("Error fetching label %s: %s", params.label_id, e)
        return _error_response("Failed to fetch label")
    return _json_response({"label": _dump(label)})


@mcp.tool(
    name="createLabel",
    annotations=ToolAnnotations(
        title="Create Label",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def create_label(params: CreateLabelInput) -> CallToolResult:
    """
    Create a personal label.

    Examples:
        - params with name="waiting"
        - params with name="errands", color="green", isFavorite=true
    """
    payload = _build_payload(params, exclude={"name"})
    try:
        label = await get_client().add_label(params.name, **payload)
    except TodoistError as e:
        logger.error("Error creating label %r: %s", params.name, e)
        return _error_response("Failed to create label")
    return _json_response({"label": _dump(label)})


@mcp.tool(
    name="updateLabel",
    annotations=ToolAnnotations(
        title="Update Label",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def update_label(params: UpdateLabelInput) -> CallToolResult:
    """
    Update a personal label. Fields you leave out are not touched.

    Renaming a label also renames it on every task that carries it.
    """
    payload = _build_payload(params, exclude={"label_id"})
    try:
        label = await get_client().update_label(params.label_id, **payload)
    except TodoistError as e:
        logger.error("Error updating label %s: %s", params.label_id, e)
        return _error_response("Failed to update label")
    return _json_response({"label": _dump(label)})


@mcp.tool(
    name="deleteLabel",
    annotations=ToolAnnotations(
        title="Delete Label",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def delete_label(params: LabelIdInput) -> CallToolResult:
    """Delete a personal label and remove it from all tasks."""
    try:
        await get_client().delete_label(params.label_id)
    except TodoistError as e:
        logger.error("Error deleting label %s: %s", params.label_id, e)
        return _error_response("Failed to delete label")
    return _success_response()


# ============================================================================
# Shared labels
# ============================================================================


@mcp.tool(
    name="getSharedLabels",
    annotations=ToolAnnotations(
        title="Get Shared Labels",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def get_shared_labels(params: SharedLabelsInput) -> CallToolResult:
    """
    List the names of labels used on tasks shared with the user.

    Shared labels are plain names without an ID. Set omitPersonal=true to leave
    out names that also exist as personal labels.

    Returns:
        JSON object {"labels": ["name", ...]}
    """
    try:
        labels = await get_client().get_shared_labels(omit_personal=bool(params.omit_personal))
    except TodoistError as e:
        logger.error("Error getting shared labels: %s", e)
        return _error_response("Failed to get shared labels")
    return _json_response({"labels": labels})


@mcp.tool(
    name="renameSharedLabel",
    annotations=ToolAnnotations(
        title="Rename Shared Label",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def rename_shared_label(params: RenameSharedLabelInput) -> CallToolResult:
    """Rename a shared label on every task the user can access."""
    try:
        await get_client().rename_shared_label(params.name, params.new_name)
    except TodoistError as e:
        logger.error("Error renaming shared label %r to %r: %s", params.name, params.new_name, e)
        return _error_response("Failed to rename shared label")
    return _success_response()


@mcp.tool(
    name="removeSharedLabel",
    annotations=ToolAnnotations(
        title="Remove Shared Label",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def remove_shared_label(params: RemoveSharedLabelInput) -> CallToolResult:
    """Remove a shared label from all active tasks."""
    try:
        await get_client().remove_shared_label(params.name)
    except TodoistError as e:
        logger.error("Error removing shared label %r: %s", params.name, e)
        return _error_response("Failed to remove shared label")
    return _success_response()
