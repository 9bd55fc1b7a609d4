"""Models for the Todoist resources returned by the REST API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Due(BaseModel):
    """Due date of a task, as reported by Todoist."""

    model_config = ConfigDict(extra="allow")

    string: str = ""
    date: str = ""
    is_recurring: bool = False
    datetime: str | None = None
    timezone: str | None = None
    lang: str | None = None


class Task(BaseModel):
    """Model representing a Todoist task."""

    model_config = ConfigDict(extra="allow")

    id: str
    content: str = ""
    description: str = ""
    project_id: str | None = None
    section_id: str | None = None
    parent_id: str | None = None
    order: int | None = None
    priority: int = 1
    labels: list[str] = Field(default_factory=list)
    due: Due | None = None
    assignee_id: str | None = None
    assigner_id: str | None = None
    creator_id: str | None = None
    comment_count: int = 0
    is_completed: bool = False
    created_at: str | None = None
    url: str | None = None


class Project(BaseModel):
    """Model representing a Todoist project."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str = ""
    parent_id: str | None = None
    color: str | None = None
    order: int | None = None
    comment_count: int = 0
    is_shared: bool = False
    is_favorite: bool = False
    is_inbox_project: bool = False
    is_team_inbox: bool = False
    view_style: str | None = None
    url: str | None = None
    is_archived: bool = False


class Section(BaseModel):
    """Model representing a section inside a project."""

    model_config = ConfigDict(extra="allow")

    id: str
    project_id: str | None = None
    order: int | None = None
    name: str = ""


class Attachment(BaseModel):
    """File attached to a comment."""

    model_config = ConfigDict(extra="allow")

    file_name: str | None = None
    file_type: str | None = None
    file_url: str | None = None
    resource_type: str | None = None


class Comment(BaseModel):
    """A comment on either a task or a project, never both."""

    model_config = ConfigDict(extra="allow")

    id: str
    task_id: str | None = None
    project_id: str | None = None
    posted_at: str | None = None
    content: str = ""
    attachment: Attachment | None = None


class Label(BaseModel):
    """Model representing a personal label."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str = ""
    color: str | None = None
    order: int | None = None
    is_favorite: bool = False


class Collaborator(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str = ""
    email: str = ""
