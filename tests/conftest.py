"""Pytest fixtures and configuration for clickup-report tests."""

import pytest
from datetime import datetime, timezone
import uuid

from clickupreport.models.task import Task


@pytest.fixture
def sample_task_base():
    """Base task data for creating test tasks.

    Returns a dict with default task attributes that can be overridden.
    """
    return {
        "id": str(uuid.uuid4()),
        "name": "Test Task",
        "priority": None,
        "due_date": None,
        "status": {"status": "to do"},
        "list": {"id": "list-1", "name": "Inbox"},
        "date_closed": None,
    }


@pytest.fixture
def make_task(sample_task_base):
    """Factory building a Task from the base data plus overrides.

    Shortcuts: status="..." sets the status label, list_name="..." the list
    name, priority="..." the priority label.
    """
    def _make(**overrides):
        data = {**sample_task_base, "id": str(uuid.uuid4())}
        if "status" in overrides and isinstance(overrides["status"], str):
            overrides["status"] = {"status": overrides["status"]}
        if "list_name" in overrides:
            overrides["list"] = {"id": None, "name": overrides.pop("list_name")}
        if "priority" in overrides and isinstance(overrides["priority"], str):
            overrides["priority"] = {"priority": overrides["priority"], "color": None}
        data.update(overrides)
        return Task(**data)

    return _make


@pytest.fixture
def wednesday_now():
    """A fixed Wednesday afternoon (UTC)."""
    return datetime(2024, 1, 17, 15, 30, 0, tzinfo=timezone.utc)
