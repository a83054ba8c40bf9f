"""Constants for clickup-report.

This module centralizes the fixed labels and default values used throughout the application.
"""

from datetime import datetime, timezone


# Status labels (lowercased) that count as completed
COMPLETED_STATUSES = frozenset({"complete", "completed", "done", "closed", "finished"})

# Substring marking an in-progress status
IN_PROGRESS_MARKER = "progress"

# Far-future stand-in for "no due date"; sorts after every real date
DUE_DATE_SENTINEL = datetime(9999, 12, 31, 23, 59, 59, tzinfo=timezone.utc)

# Group label for tasks without a list name
NO_LIST_LABEL = "No List"

# Priority ranks
PRIORITY_RANK_URGENT = 1
PRIORITY_RANK_HIGH = 2
PRIORITY_RANK_NORMAL = 3
PRIORITY_RANK_LOW = 4
PRIORITY_RANK_NONE = 5

# ClickUp API
CLICKUP_API_BASE = "https://api.clickup.com/api/v2"
DEFAULT_TIMEOUT_SECONDS = 10.0

# Due-date wire formats
DUE_DATE_FORMAT_EPOCH_MS = "epoch_ms"
DUE_DATE_FORMAT_ISO8601 = "iso8601"
