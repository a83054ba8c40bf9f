"""Priority resolution for clickup-report.

Maps free-text priority labels to an ordinal rank (1 = most urgent, 5 = none)
and a display tier. Resolution is total: unknown labels get the lowest rank.
"""

from typing import Optional
from clickupreport.models.task import Task, PriorityTier
from clickupreport.models.constants import (
    PRIORITY_RANK_URGENT,
    PRIORITY_RANK_HIGH,
    PRIORITY_RANK_NORMAL,
    PRIORITY_RANK_LOW,
    PRIORITY_RANK_NONE,
)


# Label synonyms (lowercased) for each rank
_RANK_BY_LABEL = {
    "urgent": PRIORITY_RANK_URGENT,
    "1": PRIORITY_RANK_URGENT,
    "high": PRIORITY_RANK_HIGH,
    "2": PRIORITY_RANK_HIGH,
    "normal": PRIORITY_RANK_NORMAL,
    "medium": PRIORITY_RANK_NORMAL,
    "3": PRIORITY_RANK_NORMAL,
    "low": PRIORITY_RANK_LOW,
    "4": PRIORITY_RANK_LOW,
}

_TIER_BY_RANK = {
    PRIORITY_RANK_URGENT: PriorityTier.URGENT,
    PRIORITY_RANK_HIGH: PriorityTier.HIGH,
    PRIORITY_RANK_NORMAL: PriorityTier.NORMAL,
}


def priority_rank(label: Optional[str]) -> int:
    """Resolve a priority label to its rank.

    Matching is case-insensitive and accepts word and numeric synonyms.

    Args:
        label: Raw priority label (may be None or empty)

    Returns:
        Rank in 1..5, where 5 means unknown or absent
    """
    if not label:
        return PRIORITY_RANK_NONE
    return _RANK_BY_LABEL.get(label.lower(), PRIORITY_RANK_NONE)


def priority_tier(label: Optional[str]) -> PriorityTier:
    """Resolve a priority label to its display tier.

    Low and unknown priorities share the NONE tier.
    """
    return _TIER_BY_RANK.get(priority_rank(label), PriorityTier.NONE)


def task_priority_rank(task: Task) -> int:
    return priority_rank(task.priority_label)


def task_priority_tier(task: Task) -> PriorityTier:
    return priority_tier(task.priority_label)
