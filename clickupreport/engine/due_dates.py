"""Due-date normalization for clickup-report.

A due date always normalizes to a comparable, timezone-aware UTC datetime.
Absent or unparseable values become DUE_DATE_SENTINEL so that tasks
without a due date sort last.

Two wire formats exist (epoch milliseconds and ISO-8601). Exactly one
parser is selected per run; they are never tried in sequence.
"""

import logging
import re
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Optional

from clickupreport.models.constants import (
    DUE_DATE_SENTINEL,
    DUE_DATE_FORMAT_EPOCH_MS,
    DUE_DATE_FORMAT_ISO8601,
)

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_epoch_millis(raw: Optional[str]) -> Optional[datetime]:
    """Parse an epoch-millisecond string into a UTC datetime.

    Args:
        raw: Decimal integer string, optionally signed

    Returns:
        UTC datetime, or None if raw is empty, malformed or out of range
    """
    if not raw or not _INTEGER_RE.fullmatch(raw):
        return None
    try:
        return _EPOCH + timedelta(milliseconds=int(raw))
    except (ValueError, OverflowError):
        # Digit strings past the int conversion limit raise ValueError
        return None


def is_sentinel(value: datetime) -> bool:
    """Check whether a normalized due date is the "no due date" sentinel."""
    return value == DUE_DATE_SENTINEL


class DueDateParser(ABC):
    """Turns a raw due-date value into a comparable point in time."""

    name: str = ""

    @abstractmethod
    def _parse(self, raw: str) -> Optional[datetime]:
        """Parse a non-empty raw value; return None when it cannot be parsed."""

    def parse(self, raw: Optional[str]) -> datetime:
        """Normalize a raw due date.

        Never raises: empty or invalid input yields DUE_DATE_SENTINEL.
        """
        if not raw:
            return DUE_DATE_SENTINEL
        parsed = self._parse(raw)
        if parsed is None:
            logger.debug(f"Unparseable {self.name} due date {raw!r}, treating as no due date")
            return DUE_DATE_SENTINEL
        return parsed


class EpochMillisDueDateParser(DueDateParser):
    """Due dates as epoch-millisecond strings (ClickUp's native format)."""

    name = DUE_DATE_FORMAT_EPOCH_MS

    def _parse(self, raw: str) -> Optional[datetime]:
        return parse_epoch_millis(raw)


class IsoDueDateParser(DueDateParser):
    """Due dates as ISO-8601 timestamp strings. Naive values are read as UTC."""

    name = DUE_DATE_FORMAT_ISO8601

    def _parse(self, raw: str) -> Optional[datetime]:
        value = raw.strip()
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(value)
            if parsed.tzinfo is None:
                return parsed.replace(tzinfo=timezone.utc)
            return parsed.astimezone(timezone.utc)
        except (ValueError, OverflowError):
            return None


_PARSERS = {
    DUE_DATE_FORMAT_EPOCH_MS: EpochMillisDueDateParser,
    DUE_DATE_FORMAT_ISO8601: IsoDueDateParser,
}

DUE_DATE_FORMATS = tuple(_PARSERS)


def get_due_date_parser(name: str = DUE_DATE_FORMAT_EPOCH_MS) -> DueDateParser:
    """Select the due-date parser for a wire format.

    Args:
        name: "epoch_ms" or "iso8601"

    Raises:
        ValueError: If the format name is unknown
    """
    try:
        return _PARSERS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown due date format {name!r}. Expected one of: {', '.join(DUE_DATE_FORMATS)}"
        ) from None


_default_parser = EpochMillisDueDateParser()


def normalize_due_date(raw: Optional[str], parser: Optional[DueDateParser] = None) -> datetime:
    """Normalize a raw due date with the given parser (epoch milliseconds by default)."""
    return (parser or _default_parser).parse(raw)
