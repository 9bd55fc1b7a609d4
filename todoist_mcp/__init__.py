"""
MCP Server for Todoist.

This server exposes the Todoist REST API as MCP tools, letting an agent list,
create, update and delete tasks, projects, sections, comments and labels.
"""

__version__ = "0.1.0"

# Re-export client and errors
from todoist_mcp.client import TodoistClient, get_client, set_client
from todoist_mcp.config import Settings, get_settings
from todoist_mcp.enums import ViewStyle
from todoist_mcp.exceptions import (
    TodoistAPIError,
    TodoistConfigurationError,
    TodoistConnectionError,
    TodoistError,
    TodoistRequestError,
    TodoistResponseError,
)

# Re-export models
from todoist_mcp.models import (
    AttachmentInput,
    CommentIdInput,
    CreateCommentInput,
    CreateLabelInput,
    CreateProjectInput,
    CreateSectionInput,
    CreateTaskInput,
    GetTaskInput,
    LabelIdInput,
    ListCommentsInput,
    ListLabelsInput,
    ListProjectsInput,
    ListSectionsInput,
    ListTasksInput,
    ProjectIdInput,
    RemoveSharedLabelInput,
    RenameSharedLabelInput,
    SectionIdInput,
    SharedLabelsInput,
    TaskIdInput,
    UpdateCommentInput,
    UpdateLabelInput,
    UpdateProjectInput,
    UpdateSectionInput,
    UpdateTaskInput,
)

# Re-export MCP server instance
from todoist_mcp.server import mcp

# Re-export tools
from todoist_mcp.tools import (
    archive_project,
    complete_task,
    create_comment,
    create_label,
    create_project,
    create_section,
    create_task,
    delete_comment,
    delete_label,
    delete_project,
    delete_section,
    delete_task,
    get_comment,
    get_label,
    get_project,
    get_project_collaborators,
    get_section,
    get_shared_labels,
    get_task,
    list_comments,
    list_labels,
    list_projects,
    list_sections,
    list_tasks,
    remove_shared_label,
    rename_shared_label,
    reopen_task,
    unarchive_project,
    update_comment,
    update_label,
    update_project,
    update_section,
    update_task,
)

__all__ = [
    "__version__",
    # Client, config, errors
    "TodoistClient",
    "get_client",
    "set_client",
    "Settings",
    "get_settings",
    "ViewStyle",
    "TodoistError",
    "TodoistAPIError",
    "TodoistConfigurationError",
    "TodoistConnectionError",
    "TodoistRequestError",
    "TodoistResponseError",
    # Input models
    "ListTasksInput",
    "GetTaskInput",
    "CreateTaskInput",
    "UpdateTaskInput",
    "TaskIdInput",
    "ListProjectsInput",
    "ProjectIdInput",
    "CreateProjectInput",
    "UpdateProjectInput",
    "ListSectionsInput",
    "SectionIdInput",
    "CreateSectionInput",
    "UpdateSectionInput",
    "ListCommentsInput",
    "CommentIdInput",
    "AttachmentInput",
    "CreateCommentInput",
    "UpdateCommentInput",
    "ListLabelsInput",
    "LabelIdInput",
    "CreateLabelInput",
    "UpdateLabelInput",
    "SharedLabelsInput",
    "RenameSharedLabelInput",
    "RemoveSharedLabelInput",
    # Tools
    "list_tasks",
    "get_task",
    "create_task",
    "update_task",
    "complete_task",
    "reopen_task",
    "delete_task",
    "list_projects",
    "get_project",
    "create_project",
    "update_project",
    "archive_project",
    "unarchive_project",
    "delete_project",
    "get_project_collaborators",
    "list_sections",
    "get_section",
    "create_section",
    "update_section",
    "delete_section",
    "list_comments",
    "get_comment",
    "create_comment",
    "update_comment",
    "delete_comment",
    "list_labels",
    "get_label",
    "create_label",
    "update_label",
    "delete_label",
    "get_shared_labels",
    "rename_shared_label",
    "remove_shared_label",
    # MCP server instance
    "mcp",
]
