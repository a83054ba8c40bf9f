"""Task ranking for clickup-report.

Sorts tasks by priority rank, then by due date within each rank.
Tasks without a due date go last within their rank.
"""

from datetime import datetime
from typing import Iterable, List, Optional, Tuple
from clickupreport.models.task import Task
from clickupreport.engine.priority import task_priority_rank
from clickupreport.engine.due_dates import DueDateParser, normalize_due_date


def rank_key(task: Task, parser: Optional[DueDateParser] = None) -> Tuple[int, datetime]:
    """Get the sort key for a task.

    Args:
        task: Task to get sort key for
        parser: Due-date parser (epoch milliseconds when None)

    Returns:
        Tuple for sorting: (priority rank, normalized due date)
    """
    return (task_priority_rank(task), normalize_due_date(task.due_date, parser))


def rank_tasks(tasks: Iterable[Task], parser: Optional[DueDateParser] = None) -> List[Task]:
    """Rank tasks, most urgent first.

    Tasks are sorted:
    1. By priority rank (1 = urgent first, 5 = no priority last)
    2. Within rank, by due date (earliest first, no due date last)

    The sort is stable, so full ties keep their input order and repeated
    runs over the same input give the same output.

    Args:
        tasks: Tasks to rank
        parser: Due-date parser (epoch milliseconds when None)

    Returns:
        New list of tasks in display order
    """
    return sorted(tasks, key=lambda task: rank_key(task, parser))
