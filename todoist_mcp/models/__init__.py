"""Pydantic models for Todoist MCP."""

from todoist_mcp.models.entities import (
    Attachment,
    Collaborator,
    Comment,
    Due,
    Label,
    Project,
    Section,
    Task,
)
from todoist_mcp.models.inputs import (
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
    ToolInput,
    UpdateCommentInput,
    UpdateLabelInput,
    UpdateProjectInput,
    UpdateSectionInput,
    UpdateTaskInput,
)

__all__ = [
    # Resource models
    "Attachment",
    "Collaborator",
    "Comment",
    "Due",
    "Label",
    "Project",
    "Section",
    "Task",
    # Input models
    "ToolInput",
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
]
