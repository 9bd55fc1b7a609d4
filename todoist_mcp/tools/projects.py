"""MCP tool definitions for Todoist projects."""

import logging

from mcp.types import CallToolResult, ToolAnnotations

from todoist_mcp.client import get_client
from todoist_mcp.exceptions import TodoistError
from todoist_mcp.models.inputs import (
    CreateProjectInput,
    ListProjectsInput,
    ProjectIdInput,
    UpdateProjectInput,
)
from todoist_mcp.server import mcp
from todoist_mcp.utils.parsers import _dump
from todoist_mcp.utils.payloads import _build_payload
from todoist_mcp.utils.responses import _error_response, _json_response, _success_response

logger = logging.getLogger(__name__)


@mcp.tool(
    name="listProjects",
    annotations=ToolAnnotations(
        title="List Projects",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def list_projects(params: ListProjectsInput) -> CallToolResult:
    """
    List all projects, including the Inbox.

    Use this to look up project IDs before creating tasks or sections.

    Returns:
        JSON object {"projects": [...]}
    """
    try:
        projects = await get_client().get_projects()
    except TodoistError as e:
        logger.error("Error fetching projects: %s", e)
        return _error_response("Failed to fetch projects")
    return _json_response({"projects": _dump(projects)})


@mcp.tool(
    name="getProject",
    annotations=ToolAnnotations(
        title="Get Project",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def get_project(params: ProjectIdInput) -> CallToolResult:
    """Retrieve a project by ID."""
    try:
        project = await get_client().get_project(params.project_id)
    except TodoistError as e:
        logger.error("Error fetching project %s: %s", params.project_id, e)
        return _error_response("Failed to fetch project")
    return _json_response({"project": _dump(project)})


@mcp.tool(
    name="createProject",
    annotations=ToolAnnotations(
        title="Create Project",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def create_project(params: CreateProjectInput) -> CallToolResult:
    """
    Create a new project.

    Args:
        params: CreateProjectInput with name (required), parentId, color,
            isFavorite and viewStyle ("list" or "board")

    Returns:
        JSON object {"project": {...}}

    Examples:
        - Simple project: params with name="Groceries"
        - Board under a parent: params with name="Sprint 12", parentId="2203306141", viewStyle="board"
    """
    payload = _build_payload(params, exclude={"name"})
    try:
        project = await get_client().add_project(params.name, **payload)
    except TodoistError as e:
        logger.error("Error creating project %r: %s", params.name, e)
        return _error_response("Failed to create project")
    return _json_response({"project": _dump(project)})


@mcp.tool(
    name="updateProject",
    annotations=ToolAnnotations(
        title="Update Project",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def update_project(params: UpdateProjectInput) -> CallToolResult:
    """
    Update a project's name, color, favorite flag or view style.

    Fields you leave out are not touched.

    Returns:
        JSON object {"project": {...}} with the updated project
    """
    payload = _build_payload(params, exclude={"project_id"})
    try:
        project = await get_client().update_project(params.project_id, **payload)
    except TodoistError as e:
        logger.error("Error updating project %s: %s", params.project_id, e)
        return _error_response("Failed to update project")
    return _json_response({"project": _dump(project)})


@mcp.tool(
    name="archiveProject",
    annotations=ToolAnnotations(
        title="Archive Project",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def archive_project(params: ProjectIdInput) -> CallToolResult:
    """Archive a project and its descendants. Use unarchiveProject to bring it back."""
    try:
        await get_client().archive_project(params.project_id)
    except TodoistError as e:
        logger.error("Error archiving project %s: %s", params.project_id, e)
        return _error_response("Failed to archive project")
    return _success_response()


@mcp.tool(
    name="unarchiveProject",
    annotations=ToolAnnotations(
        title="Unarchive Project",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def unarchive_project(params: ProjectIdInput) -> CallToolResult:
    """Restore an archived project."""
    try:
        await get_client().unarchive_project(params.project_id)
    except TodoistError as e:
        logger.error("Error unarchiving project %s: %s", params.project_id, e)
        return _error_response("Failed to unarchive project")
    return _success_response()


@mcp.tool(
    name="deleteProject",
    annotations=ToolAnnotations(
        title="Delete Project",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def delete_project(params: ProjectIdInput) -> CallToolResult:
    """
    Permanently delete a project with all its sections and tasks.

    This cannot be undone. Prefer archiveProject to keep the history.
    """
    try:
        await get_client().delete_project(params.project_id)
    except TodoistError as e:
        logger.error("Error deleting project %s: %s", params.project_id, e)
        return _error_response("Failed to delete project")
    return _success_response()


@mcp.tool(
    name="getProjectCollaborators",
    annotations=ToolAnnotations(
        title="Get Project Collaborators",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
    structured_output=False,
)
async def get_project_collaborators(params: ProjectIdInput) -> CallToolResult:
    """
    List the people a shared project is shared with.

    Use the returned IDs as assigneeId when creating or updating tasks.

    Returns:
        JSON object {"collaborators": [{"id", "name", "email"}, ...]}
    """
    try:
        collaborators = await get_client().get_project_collaborators(params.project_id)
    except TodoistError as e:
        logger.error("Error fetching collaborators of project %s: %s", params.project_id, e)
        return _error_response("Failed to fetch project collaborators")
    return _json_response({"collaborators": _dump(collaborators)})
