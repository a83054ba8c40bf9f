"""Grouping of tasks by list for clickup-report."""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional
from clickupreport.models.task import Task
from clickupreport.models.constants import NO_LIST_LABEL
from clickupreport.engine.due_dates import DueDateParser
from clickupreport.engine.ranking import rank_tasks


@dataclass
class TaskGroup:
    """Tasks sharing one list name, in ranked order."""
    list_name: str
    tasks: List[Task] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tasks)


def group_key(task: Task) -> str:
    """List name a task is grouped under ("No List" for an empty name)."""
    return task.list_name or NO_LIST_LABEL


def group_by_list(tasks: Iterable[Task], parser: Optional[DueDateParser] = None) -> List[TaskGroup]:
    """Partition tasks by list name.

    Groups come out in ascending code-point order of list name. Each group is
    ranked on its own, regardless of the order the tasks arrived in. Only
    list names that actually occur produce a group, and every input task
    lands in exactly one group.

    Args:
        tasks: Tasks to group
        parser: Due-date parser used for ranking within each group

    Returns:
        List of TaskGroup, sorted by list name
    """
    partitions: Dict[str, List[Task]] = defaultdict(list)
    for task in tasks:
        partitions[group_key(task)].append(task)

    return [
        TaskGroup(list_name=name, tasks=rank_tasks(partitions[name], parser))
        for name in sorted(partitions)
    ]
