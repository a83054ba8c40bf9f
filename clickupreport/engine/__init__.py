"""Classification, ranking and grouping engine for clickup-report."""

from clickupreport.engine.priority import priority_rank, priority_tier
from clickupreport.engine.due_dates import (
    DueDateParser,
    EpochMillisDueDateParser,
    IsoDueDateParser,
    get_due_date_parser,
    normalize_due_date,
    is_sentinel,
)
from clickupreport.engine.classification import classify_status, classify_task, bucket_tasks
from clickupreport.engine.ranking import rank_tasks
from clickupreport.engine.grouping import TaskGroup, group_by_list
from clickupreport.engine.completion import (
    is_completed_this_week,
    count_completed_this_week,
    week_bounds,
)
from clickupreport.engine.report import TaskReport, build_report

__all__ = [
    "priority_rank",
    "priority_tier",
    "DueDateParser",
    "EpochMillisDueDateParser",
    "IsoDueDateParser",
    "get_due_date_parser",
    "normalize_due_date",
    "is_sentinel",
    "classify_status",
    "classify_task",
    "bucket_tasks",
    "rank_tasks",
    "TaskGroup",
    "group_by_list",
    "is_completed_this_week",
    "count_completed_this_week",
    "week_bounds",
    "TaskReport",
    "build_report",
]
