"""Tests for parsing ClickUp task payloads into models."""

from clickupreport.models.task import Task, TaskList


def test_parses_clickup_task_payload():
    payload = {
        "id": "86abc",
        "name": "Write report",
        "priority": {"id": "2", "priority": "high", "color": "#ffcc00", "orderindex": "2"},
        "due_date": "1700000000000",
        "status": {"status": "in progress", "color": "#4194f6", "type": "custom"},
        "list": {"id": "901", "name": "Sprint 4", "access": True},
        "date_closed": None,
        "assignees": [],
    }
    task = Task.model_validate(payload)

    assert task.priority_label == "high"
    assert task.status_label == "in progress"
    assert task.list_name == "Sprint 4"
    assert task.due_date == "1700000000000"
    assert task.date_closed is None


def test_null_fields_get_empty_defaults():
    task = Task.model_validate({"id": "1", "name": None, "priority": None, "status": None, "list": None})

    assert task.name == ""
    assert task.priority is None
    assert task.priority_label == ""
    assert task.status_label == ""
    assert task.list_name == ""


def test_numeric_timestamps_are_coerced_to_strings():
    task = Task.model_validate({"id": 42, "due_date": 1700000000000, "date_closed": 1700000001000})

    assert task.id == "42"
    assert task.due_date == "1700000000000"
    assert task.date_closed == "1700000001000"


def test_task_accepts_python_field_name_for_list():
    task = Task(id="1", task_list={"name": "Inbox"})
    assert task.list_name == "Inbox"


def test_task_list_model():
    assert TaskList.model_validate({"id": 7, "name": "Backlog", "folder": {}}).id == "7"
