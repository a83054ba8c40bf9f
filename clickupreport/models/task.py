"""Task data model for clickup-report.

Models mirror the ClickUp v2 task JSON. They are read-only snapshots:
nothing in the report pipeline mutates them.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class StatusBucket(str, Enum):
    """Mutually exclusive classification of a task's state."""
    COMPLETED = "completed"
    IN_PROGRESS = "in_progress"
    TODO = "todo"


class PriorityTier(str, Enum):
    """Display tier of a priority, used for colouring."""
    URGENT = "urgent"
    HIGH = "high"
    NORMAL = "normal"
    NONE = "none"


class TaskPriority(BaseModel):
    """Structured priority value attached to a task."""

    priority: str = Field("", description="Free-text priority label (e.g. 'urgent', '2')")
    color: Optional[str] = Field(None, description="Hex colour ClickUp assigns to the priority")

    @field_validator("priority", mode="before")
    @classmethod
    def _coerce_label(cls, v):
        if v is None:
            return ""
        return str(v)


class TaskStatusInfo(BaseModel):
    """Status object of a task."""

    status: str = Field("", description="Free-text status label; empty means unclassified")

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, v):
        return "" if v is None else v


class TaskListRef(BaseModel):
    """Reference to the list a task belongs to."""

    id: Optional[str] = Field(None, description="List identifier")
    name: str = Field("", description="List display name; empty means no list")

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, v):
        return "" if v is None else v


class TaskList(BaseModel):
    """A ClickUp list, as returned by the folder and folderless list endpoints."""

    id: str = Field(..., description="List identifier")
    name: str = Field("", description="List display name")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v):
        return v if v is None else str(v)


class Task(BaseModel):
    """Canonical Task model."""

    id: str = Field(..., description="Opaque task identifier")
    name: str = Field("", description="Task display name")
    priority: Optional[TaskPriority] = Field(None, description="Priority; None when the task has none")
    due_date: Optional[str] = Field(None, description="Raw due date as sent by the API")
    status: TaskStatusInfo = Field(default_factory=TaskStatusInfo, description="Task status")
    task_list: TaskListRef = Field(default_factory=TaskListRef, alias="list", description="Owning list")
    date_closed: Optional[str] = Field(None, description="Closure time in epoch milliseconds")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True

    @field_validator("id", "due_date", "date_closed", mode="before")
    @classmethod
    def _coerce_to_str(cls, v):
        # ClickUp sends timestamps as strings, but numbers show up in exports
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, v):
        return "" if v is None else v

    @field_validator("priority", mode="before")
    @classmethod
    def _coerce_priority(cls, v):
        if isinstance(v, (str, int)):
            return TaskPriority(priority=str(v))
        return v

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, v):
        if v is None:
            return TaskStatusInfo()
        if isinstance(v, str):
            return TaskStatusInfo(status=v)
        return v

    @field_validator("task_list", mode="before")
    @classmethod
    def _coerce_list(cls, v):
        if v is None:
            return TaskListRef()
        if isinstance(v, str):
            return TaskListRef(name=v)
        return v

    @property
    def priority_label(self) -> str:
        """Raw priority label, empty when the task has no priority."""
        return self.priority.priority if self.priority else ""

    @property
    def status_label(self) -> str:
        return self.status.status

    @property
    def list_name(self) -> str:
        return self.task_list.name
