"""Data models for clickup-report."""

from clickupreport.models.task import (
    Task,
    TaskPriority,
    TaskStatusInfo,
    TaskListRef,
    TaskList,
    StatusBucket,
    PriorityTier,
)

__all__ = [
    "Task",
    "TaskPriority",
    "TaskStatusInfo",
    "TaskListRef",
    "TaskList",
    "StatusBucket",
    "PriorityTier",
]
