"""Report assembly for clickup-report.

Turns a flat task collection into the structures the renderer consumes:
status buckets, ranked to-do and in-progress lists, per-list groups, and
the weekly completion count.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, List, Optional
from clickupreport.models.task import Task, StatusBucket
from clickupreport.engine.classification import bucket_tasks
from clickupreport.engine.completion import count_completed_this_week
from clickupreport.engine.due_dates import DueDateParser
from clickupreport.engine.grouping import TaskGroup, group_by_list
from clickupreport.engine.ranking import rank_tasks


@dataclass
class TaskReport:
    """Classified, ranked and grouped view of one run's tasks."""
    generated_at: datetime
    completed: List[Task] = field(default_factory=list)
    todo: List[Task] = field(default_factory=list)
    in_progress: List[Task] = field(default_factory=list)
    todo_by_list: List[TaskGroup] = field(default_factory=list)
    in_progress_by_list: List[TaskGroup] = field(default_factory=list)
    completed_this_week: Optional[int] = None

    @property
    def total(self) -> int:
        return len(self.completed) + len(self.todo) + len(self.in_progress)


def build_report(
    tasks: Iterable[Task],
    now: Optional[datetime] = None,
    parser: Optional[DueDateParser] = None,
    weekly_summary: bool = True,
) -> TaskReport:
    """Build a report from raw tasks.

    This function is deterministic - same inputs always produce same outputs.

    Args:
        tasks: Tasks collected from all lists
        now: Reference instant for the weekly window (current UTC time when None)
        parser: Due-date parser for ranking (epoch milliseconds when None)
        weekly_summary: Whether to count tasks completed this week

    Returns:
        TaskReport. Completed tasks keep arrival order; to-do and in-progress
        tasks are ranked, and each is also grouped by list.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    buckets = bucket_tasks(tasks)
    todo = rank_tasks(buckets[StatusBucket.TODO], parser)
    in_progress = rank_tasks(buckets[StatusBucket.IN_PROGRESS], parser)
    completed = buckets[StatusBucket.COMPLETED]

    return TaskReport(
        generated_at=now,
        completed=completed,
        todo=todo,
        in_progress=in_progress,
        todo_by_list=group_by_list(todo, parser),
        in_progress_by_list=group_by_list(in_progress, parser),
        completed_this_week=count_completed_this_week(completed, now) if weekly_summary else None,
    )
