"""MCP tool definitions for Todoist sections."""

import logging

from mcp.types import CallToolResult, ToolAnnotations

from todoist_mcp.client import get_client
from todoist_mcp.exceptions import TodoistError
from todoist_mcp.models.inputs import (
    CreateSectionInput,
    ListSectionsInput,
    SectionIdInput,
    UpdateSectionInput,
)
from todoist_mcp.server import mcp
from todoist_mcp.utils.parsers import _dump
from todoist_mcp.utils.payloads import _build_payload
from todoist_mcp.utils.responses import _error_response, _json_response, _success_response

logger = logging.getLogger(__name__)


@mcp.tool(
    name="listSections",
    annotations=ToolAnnotations(
        title="List Sections",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def list_sections(params: ListSectionsInput) -> CallToolResult:
    """
    List the sections of a project.

    A projectId is needed to get any results: without one the tool returns an
    empty list, since sections cannot be listed across all projects at once.

    Returns:
        JSON object {"sections": [...]}
    """
    if not params.project_id:
        return _json_response({"sections": []})

    try:
        sections = await get_client().get_sections(params.project_id)
    except TodoistError as e:
        logger.error("Error fetching sections of project %s: %s", params.project_id, e)
        return _error_response("Failed to fetch sections")
    return _json_response({"sections": _dump(sections)})


@mcp.tool(
    name="getSection",
    annotations=ToolAnnotations(
        title="Get Section",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def get_section(params: SectionIdInput) -> CallToolResult:
    """Retrieve a section by ID."""
    try:
        section = await get_client().get_section(params.section_id)
    except TodoistError as e:
        logger.error("Error fetching section %s: %s", params.section_id, e)
        return _error_response("Failed to fetch section")
    return _json_response({"section": _dump(section)})


@mcp.tool(
    name="createSection",
    annotations=ToolAnnotations(
        title="Create Section",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def create_section(params: CreateSectionInput) -> CallToolResult:
    """
    Create a section inside a project.

    Examples:
        - params with name="Backlog", projectId="2203306141"
        - params with name="Done", projectId="2203306141", order=3
    """
    payload = _build_payload(params, exclude={"name", "project_id"})
    try:
        section = await get_client().add_section(params.name, params.project_id, **payload)
    except TodoistError as e:
        logger.error("Error creating section %r in project %s: %s", params.name, params.project_id, e)
        return _error_response("Failed to create section")
    return _json_response({"section": _dump(section)})


@mcp.tool(
    name="updateSection",
    annotations=ToolAnnotations(
        title="Rename Section",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def update_section(params: UpdateSectionInput) -> CallToolResult:
    """Rename a section."""
    try:
        section = await get_client().update_section(params.section_id, params.name)
    except TodoistError as e:
        logger.error("Error updating section %s: %s", params.section_id, e)
        return _error_response("Failed to update section")
    return _json_response({"section": _dump(section)})


@mcp.tool(
    name="deleteSection",
    annotations=ToolAnnotations(
        title="Delete Section",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def delete_section(params: SectionIdInput) -> CallToolResult:
    """Delete a section and every task in it."""
    try:
        await get_client().delete_section(params.section_id)
    except TodoistError as e:
        logger.error("Error deleting section %s: %s", params.section_id, e)
        return _error_response("Failed to delete section")
    return _success_response()
