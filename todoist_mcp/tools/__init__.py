"""MCP tool definitions for Todoist."""

# Import all tools to register them with the MCP server
from todoist_mcp.tools.comments import (
    create_comment,
    delete_comment,
    get_comment,
    list_comments,
    update_comment,
)
from todoist_mcp.tools.labels import (
    create_label,
    delete_label,
    get_label,
    get_shared_labels,
    list_labels,
    remove_shared_label,
    rename_shared_label,
    update_label,
)
from todoist_mcp.tools.projects import (
    archive_project,
    create_project,
    delete_project,
    get_project,
    get_project_collaborators,
    list_projects,
    unarchive_project,
    update_project,
)
from todoist_mcp.tools.sections import (
    create_section,
    delete_section,
    get_section,
    list_sections,
    update_section,
)
from todoist_mcp.tools.tasks import (
    complete_task,
    create_task,
    delete_task,
    get_task,
    list_tasks,
    reopen_task,
    update_task,
)

__all__ = [
    # Task tools
    "list_tasks",
    "get_task",
    "create_task",
    "update_task",
    "complete_task",
    "reopen_task",
    "delete_task",
    # Project tools
    "list_projects",
    "get_project",
    "create_project",
    "update_project",
    "archive_project",
    "unarchive_project",
    "delete_project",
    "get_project_collaborators",
    # Section tools
    "list_sections",
    "get_section",
    "create_section",
    "update_section",
    "delete_section",
    # Comment tools
    "list_comments",
    "get_comment",
    "create_comment",
    "update_comment",
    "delete_comment",
    # Label tools
    "list_labels",
    "get_label",
    "create_label",
    "update_label",
    "delete_label",
    "get_shared_labels",
    "rename_shared_label",
    "remove_shared_label",
]
