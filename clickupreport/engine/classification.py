"""Status classification for clickup-report.

Each task belongs to exactly one bucket. Checks run in a fixed order:
completed, then in progress, then the to-do fallback.
"""

from typing import Dict, Iterable, List, Optional
from clickupreport.models.task import Task, StatusBucket
from clickupreport.models.constants import COMPLETED_STATUSES, IN_PROGRESS_MARKER


def is_completed_status(status: Optional[str]) -> bool:
    return (status or "").lower() in COMPLETED_STATUSES


def is_in_progress_status(status: Optional[str]) -> bool:
    return IN_PROGRESS_MARKER in (status or "").lower()


def classify_status(status: Optional[str]) -> StatusBucket:
    """Classify a free-text status label.

    Args:
        status: Raw status label; empty or None means unclassified

    Returns:
        COMPLETED for an exact (case-insensitive) match against the closed set,
        IN_PROGRESS when the label contains "progress", TODO otherwise
    """
    if is_completed_status(status):
        return StatusBucket.COMPLETED
    if is_in_progress_status(status):
        return StatusBucket.IN_PROGRESS
    return StatusBucket.TODO


def classify_task(task: Task) -> StatusBucket:
    return classify_status(task.status_label)


def bucket_tasks(tasks: Iterable[Task]) -> Dict[StatusBucket, List[Task]]:
    """Partition tasks into status buckets, preserving arrival order.

    Every bucket key is present, even when empty.
    """
    buckets: Dict[StatusBucket, List[Task]] = {bucket: [] for bucket in StatusBucket}
    for task in tasks:
        buckets[classify_task(task)].append(task)
    return buckets
