"""Tests for settings resolution."""

import pytest

from clickupreport.config import ConfigurationError, load_settings


def test_flags_win_over_environment():
    env = {"CLICKUP_API_KEY": "env-key", "CLICKUP_SPACE_ID": "env-space"}
    settings = load_settings(api_key="flag-key", space_id="flag-space", env=env)

    assert settings.api_key == "flag-key"
    assert settings.space_id == "flag-space"


def test_environment_used_when_flags_absent():
    env = {
        "CLICKUP_API_KEY": "env-key",
        "CLICKUP_SPACE_ID": "env-space",
        "CLICKUP_DUE_DATE_FORMAT": "iso8601",
        "CLICKUP_WEEKLY_SUMMARY": "no",
        "CLICKUP_TIMEOUT": "2.5",
        "CLICKUP_API_BASE": "https://clickup.internal/api/v2",
        "CLICKUP_LOG_LEVEL": "debug",
    }
    settings = load_settings(env=env)

    assert settings.api_key == "env-key"
    assert settings.due_date_format == "iso8601"
    assert settings.weekly_summary is False
    assert settings.timeout_seconds == 2.5
    assert settings.api_base == "https://clickup.internal/api/v2"
    assert settings.log_level == "DEBUG"


def test_defaults():
    settings = load_settings(api_key="k", space_id="s", env={})

    assert settings.due_date_format == "epoch_ms"
    assert settings.weekly_summary is True
    assert settings.timeout_seconds == 10.0
    assert settings.api_base == "https://api.clickup.com/api/v2"
    assert settings.log_level == "WARNING"


def test_missing_api_key():
    with pytest.raises(ConfigurationError, match="CLICKUP_API_KEY"):
        load_settings(space_id="s", env={})


def test_missing_space_id():
    with pytest.raises(ConfigurationError, match="CLICKUP_SPACE_ID"):
        load_settings(api_key="k", env={})


def test_unknown_due_date_format():
    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        load_settings(api_key="k", space_id="s", due_date_format="rfc2822", env={})


def test_bad_boolean_in_environment():
    env = {"CLICKUP_API_KEY": "k", "CLICKUP_SPACE_ID": "s", "CLICKUP_WEEKLY_SUMMARY": "sometimes"}
    with pytest.raises(ConfigurationError, match="CLICKUP_WEEKLY_SUMMARY"):
        load_settings(env=env)


def test_bad_timeout_in_environment():
    env = {"CLICKUP_API_KEY": "k", "CLICKUP_SPACE_ID": "s", "CLICKUP_TIMEOUT": "soon"}
    with pytest.raises(ConfigurationError, match="CLICKUP_TIMEOUT"):
        load_settings(env=env)


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("CLICKUP_API_KEY", "os-key")
    monkeypatch.setenv("CLICKUP_SPACE_ID", "os-space")

    settings = load_settings(use_dotenv=False)
    assert settings.api_key == "os-key"
    assert settings.space_id == "os-space"
