"""Tests for due-date normalization."""

from datetime import datetime, timezone

import pytest

from clickupreport.engine.due_dates import (
    EpochMillisDueDateParser,
    IsoDueDateParser,
    get_due_date_parser,
    is_sentinel,
    normalize_due_date,
    parse_epoch_millis,
)
from clickupreport.models.constants import DUE_DATE_SENTINEL


def test_sentinel_is_end_of_year_9999_utc():
    assert DUE_DATE_SENTINEL == datetime(9999, 12, 31, 23, 59, 59, tzinfo=timezone.utc)


@pytest.mark.parametrize("raw", ["", None, "not-a-number", "12.5", "1e12", " 1700000000000", "99999999999999999999"])
def test_absent_or_invalid_yields_sentinel(raw):
    assert normalize_due_date(raw) == DUE_DATE_SENTINEL


def test_empty_and_garbage_share_sentinel():
    assert normalize_due_date("") == normalize_due_date("not-a-number")


def test_epoch_millis_parsed_as_utc():
    value = normalize_due_date("1700000000000")
    assert value == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
    assert value.tzinfo is not None


def test_epoch_millis_keeps_millisecond_precision():
    value = normalize_due_date("1700000000123")
    assert value.microsecond == 123000


def test_negative_epoch_millis():
    assert parse_epoch_millis("-1000") == datetime(1969, 12, 31, 23, 59, 59, tzinfo=timezone.utc)


def test_normalization_is_idempotent():
    parser = EpochMillisDueDateParser()
    assert parser.parse("1700000000000") == parser.parse("1700000000000")
    assert parser.parse("junk") == parser.parse("junk")


def test_iso_parser_handles_z_and_naive_values():
    parser = IsoDueDateParser()
    expected = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)
    assert parser.parse("2024-03-01T09:00:00Z") == expected
    assert parser.parse("2024-03-01T09:00:00") == expected
    assert parser.parse("2024-03-01T10:00:00+01:00") == expected


def test_iso_parser_does_not_accept_epoch_millis():
    """Selected format is never mixed with the other one."""
    assert IsoDueDateParser().parse("1700000000000") == DUE_DATE_SENTINEL
    assert EpochMillisDueDateParser().parse("2024-03-01T09:00:00Z") == DUE_DATE_SENTINEL


def test_get_due_date_parser_by_name():
    assert isinstance(get_due_date_parser("epoch_ms"), EpochMillisDueDateParser)
    assert isinstance(get_due_date_parser("iso8601"), IsoDueDateParser)
    assert isinstance(get_due_date_parser(), EpochMillisDueDateParser)


def test_get_due_date_parser_rejects_unknown_name():
    with pytest.raises(ValueError, match="Unknown due date format"):
        get_due_date_parser("rfc2822")


def test_is_sentinel():
    assert is_sentinel(normalize_due_date(None)) is True
    assert is_sentinel(normalize_due_date("1700000000000")) is False


@pytest.mark.parametrize("raw", ["1" * 5000, "-" + "9" * 4301])
def test_epoch_millis_too_long_to_convert_yields_sentinel(raw):
    assert normalize_due_date(raw) == DUE_DATE_SENTINEL
    assert parse_epoch_millis(raw) is None


@pytest.mark.parametrize(
    "raw",
    ["9999-12-31T23:30:00-01:00", "0001-01-01T00:00:00+01:00", "2024-02-30T00:00:00Z"],
)
def test_iso_values_that_cannot_become_utc_yield_sentinel(raw):
    assert IsoDueDateParser().parse(raw) == DUE_DATE_SENTINEL
