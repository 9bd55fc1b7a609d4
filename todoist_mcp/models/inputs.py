"""Input models for Todoist MCP tools."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from todoist_mcp.enums import ViewStyle


class ToolInput(BaseModel):
    """Base model for tool parameters.

    Parameters are exposed to clients in camelCase (``taskId``, ``dueString``)
    and are also accepted under their snake_case field names.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


def _require_text(value: str, name: str) -> str:
    if not value.strip():
        raise ValueError(f"{name} cannot be empty")
    return value.strip()


# ============================================================================
# Task Input Models
# ============================================================================


class ListTasksInput(ToolInput):
    """Input model for listing active tasks."""

    project_id: str | None = Field(default=None, description="Only return tasks in this project")
    section_id: str | None = Field(default=None, description="Only return tasks in this section")
    label: str | None = Field(default=None, description="Only return tasks carrying this label name")
    filter: str | None = Field(
        default=None,
        description="Todoist filter query (e.g., 'today | overdue', '#Work & p1')",
    )
    lang: str | None = Field(default=None, description="IETF language tag the filter is written in")
    ids: list[str] | None = Field(default=None, description="Only return tasks with these IDs", min_length=1)


class GetTaskInput(ToolInput):
    """Input model for fetching a single task."""

    task_id: str = Field(..., description="ID of the task", min_length=1)


class CreateTaskInput(ToolInput):
    """Input model for creating a task."""

    content: str = Field(..., description="Task content (title), required", min_length=1)
    description: str | None = Field(default=None, description="Longer task description")
    project_id: str | None = Field(default=None, description="Project to create the task in (defaults to Inbox)")
    section_id: str | None = Field(default=None, description="Section to create the task in")
    parent_id: str | None = Field(default=None, description="Parent task ID, to create a sub-task")
    order: int | None = Field(default=None, description="Position among sibling tasks")
    labels: list[str] | None = Field(default=None, description="Label names to apply")
    priority: int | None = Field(default=None, description="Priority from 1 (normal) to 4 (urgent)", ge=1, le=4)
    due_string: str | None = Field(
        default=None,
        description="Natural-language due date (e.g., 'tomorrow at 5pm', 'every monday')",
    )
    due_date: str | None = Field(default=None, description="Due date as YYYY-MM-DD")
    due_datetime: str | None = Field(default=None, description="Due date and time in RFC 3339 format")
    due_lang: str | None = Field(default=None, description="Language of dueString when not English")
    assignee_id: str | None = Field(default=None, description="ID of the collaborator responsible for the task")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        return _require_text(v, "Content")


class UpdateTaskInput(ToolInput):
    """Input model for updating a task.

    Only the fields that are provided are sent. Passing ``assigneeId: null``
    explicitly removes the current assignee.
    """

    task_id: str = Field(..., description="ID of the task to update", min_length=1)
    content: str | None = Field(default=None, description="New task content")
    description: str | None = Field(default=None, description="New task description")
    labels: list[str] | None = Field(default=None, description="Replacement list of label names")
    priority: int | None = Field(default=None, description="Priority from 1 (normal) to 4 (urgent)", ge=1, le=4)
    due_string: str | None = Field(
        default=None,
        description="Natural-language due date; use 'no date' to clear the due date",
    )
    due_date: str | None = Field(default=None, description="Due date as YYYY-MM-DD")
    due_datetime: str | None = Field(default=None, description="Due date and time in RFC 3339 format")
    due_lang: str | None = Field(default=None, description="Language of dueString when not English")
    assignee_id: str | None = Field(
        default=None,
        description="ID of the responsible collaborator; pass null to unassign",
    )


class TaskIdInput(ToolInput):
    """Input model for operations addressed by task ID only."""

    task_id: str = Field(..., description="ID of the task", min_length=1)


# ============================================================================
# Project Input Models
# ============================================================================


class ListProjectsInput(ToolInput):
    """Input model for listing projects (no parameters)."""


class ProjectIdInput(ToolInput):
    """Input model for operations addressed by project ID only."""

    project_id: str = Field(..., description="ID of the project", min_length=1)


class CreateProjectInput(ToolInput):
    """Input model for creating a project."""

    name: str = Field(..., description="Project name", min_length=1, max_length=120)
    parent_id: str | None = Field(default=None, description="Parent project ID, to nest the project")
    color: str | None = Field(default=None, description="Color name (e.g., 'berry_red', 'blue')")
    is_favorite: bool | None = Field(default=None, description="Mark the project as a favorite")
    view_style: ViewStyle | None = Field(default=None, description="Project layout: list or board")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return _require_text(v, "Name")


class UpdateProjectInput(ToolInput):
    """Input model for updating a project. Omitted fields are left unchanged."""

    project_id: str = Field(..., description="ID of the project to update", min_length=1)
    name: str | None = Field(default=None, description="New project name", max_length=120)
    color: str | None = Field(default=None, description="New color name")
    is_favorite: bool | None = Field(default=None, description="Favorite flag")
    view_style: ViewStyle | None = Field(default=None, description="Project layout: list or board")


# ============================================================================
# Section Input Models
# ============================================================================


class ListSectionsInput(ToolInput):
    """Input model for listing sections."""

    project_id: str | None = Field(default=None, description="Project whose sections to list")


class SectionIdInput(ToolInput):
    """Input model for operations addressed by section ID only."""

    section_id: str = Field(..., description="ID of the section", min_length=1)


class CreateSectionInput(ToolInput):
    """Input model for creating a section."""

    name: str = Field(..., description="Section name", min_length=1)
    project_id: str = Field(..., description="Project the section belongs to", min_length=1)
    order: int | None = Field(default=None, description="Position of the section in the project")


class UpdateSectionInput(ToolInput):
    """Input model for renaming a section."""

    section_id: str = Field(..., description="ID of the section", min_length=1)
    name: str = Field(..., description="New section name", min_length=1)


# ============================================================================
# Comment Input Models
# ============================================================================


class ListCommentsInput(ToolInput):
    """Input model for listing comments.

    Exactly one of task_id or project_id is expected; task_id wins if both are given.
    """

    task_id: str | None = Field(default=None, description="Task whose comments to list")
    project_id: str | None = Field(default=None, description="Project whose comments to list")


class CommentIdInput(ToolInput):
    """Input model for operations addressed by comment ID only."""

    comment_id: str = Field(..., description="ID of the comment", min_length=1)


class AttachmentInput(ToolInput):
    """File attachment for a new comment."""

    file_url: str = Field(..., description="URL of the attached file", min_length=1)
    file_name: str | None = Field(default=None, description="File name shown in Todoist")
    file_type: str | None = Field(default=None, description="MIME type of the file")
    resource_type: str | None = Field(default=None, description="Attachment kind (e.g., 'file', 'url', 'image')")


class CreateCommentInput(ToolInput):
    """Input model for adding a comment to a task or project."""

    content: str = Field(..., description="Comment text (markdown supported)", min_length=1)
    task_id: str | None = Field(default=None, description="Task to comment on")
    project_id: str | None = Field(default=None, description="Project to comment on")
    attachment: AttachmentInput | None = Field(default=None, description="Optional file attachment")


class UpdateCommentInput(ToolInput):
    """Input model for editing a comment."""

    comment_id: str = Field(..., description="ID of the comment", min_length=1)
    content: str = Field(..., description="New comment text", min_length=1)


# ============================================================================
# Label Input Models
# ============================================================================


class ListLabelsInput(ToolInput):
    """Input model for listing personal labels (no parameters)."""


class LabelIdInput(ToolInput):
    """Input model for operations addressed by label ID only."""

    label_id: str = Field(..., description="ID of the label", min_length=1)


class CreateLabelInput(ToolInput):
    """Input model for creating a personal label."""

    name: str = Field(..., description="Label name", min_length=1, max_length=60)
    color: str | None = Field(default=None, description="Color name (e.g., 'charcoal')")
    order: int | None = Field(default=None, description="Position in the label list")
    is_favorite: bool | None = Field(default=None, description="Mark the label as a favorite")


class UpdateLabelInput(ToolInput):
    """Input model for updating a personal label. Omitted fields are left unchanged."""

    label_id: str = Field(..., description="ID of the label", min_length=1)
    name: str | None = Field(default=None, description="New label name", max_length=60)
    color: str | None = Field(default=None, description="New color name")
    order: int | None = Field(default=None, description="New position in the label list")
    is_favorite: bool | None = Field(default=None, description="Favorite flag")


class SharedLabelsInput(ToolInput):
    """Input model for listing shared labels."""

    omit_personal: bool | None = Field(
        default=None,
        description="Leave out labels that also exist as personal labels",
    )


class RenameSharedLabelInput(ToolInput):
    """Input model for renaming a shared label everywhere it is used."""

    name: str = Field(..., description="Current shared label name", min_length=1)
    new_name: str = Field(..., description="New shared label name", min_length=1)


class RemoveSharedLabelInput(ToolInput):
    """Input model for removing a shared label from all active tasks."""

    name: str = Field(..., description="Shared label name to remove", min_length=1)
