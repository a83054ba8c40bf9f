"""Runtime configuration for clickup-report.

Settings are resolved once at startup (flags, then environment, then
defaults) and passed explicitly to the client and the report pipeline.
"""

import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from clickupreport.engine.due_dates import DUE_DATE_FORMATS
from clickupreport.models.constants import (
    CLICKUP_API_BASE,
    DEFAULT_TIMEOUT_SECONDS,
    DUE_DATE_FORMAT_EPOCH_MS,
)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigurationError(ValueError):
    """Settings are missing or invalid; the run cannot start."""


class Settings(BaseModel):
    """Resolved settings for one report run."""

    api_key: str = Field(..., min_length=1, description="ClickUp personal API token")
    space_id: str = Field(..., min_length=1, description="ClickUp space to report on")
    due_date_format: str = Field(DUE_DATE_FORMAT_EPOCH_MS, description="Wire format of task due dates")
    weekly_summary: bool = Field(True, description="Whether to report tasks completed this week")
    timeout_seconds: float = Field(DEFAULT_TIMEOUT_SECONDS, gt=0, description="Per-request timeout")
    api_base: str = Field(CLICKUP_API_BASE, description="ClickUp API root URL")
    log_level: str = Field("WARNING", description="Logging level name")

    @field_validator("due_date_format")
    @classmethod
    def _validate_due_date_format(cls, v):
        if v not in DUE_DATE_FORMATS:
            raise ValueError(f"must be one of: {', '.join(DUE_DATE_FORMATS)}")
        return v

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v):
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"must be one of: {', '.join(sorted(_LOG_LEVELS))}")
        return level


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean (true/false), got {value!r}")


def _parse_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from None


def load_settings(
    api_key: Optional[str] = None,
    space_id: Optional[str] = None,
    due_date_format: Optional[str] = None,
    weekly_summary: Optional[bool] = None,
    timeout_seconds: Optional[float] = None,
    log_level: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    use_dotenv: bool = True,
) -> Settings:
    """Resolve settings from explicit values and the environment.

    Explicit (non-None) arguments win over environment variables, which win
    over defaults.

    Args:
        env: Environment mapping to read (os.environ when None)
        use_dotenv: Load a .env file from the working directory first

    Returns:
        Settings

    Raises:
        ConfigurationError: If credentials are missing or a value is invalid
    """
    if env is None:
        if use_dotenv:
            load_dotenv()
        env = os.environ

    api_key = api_key or env.get("CLICKUP_API_KEY", "")
    space_id = space_id or env.get("CLICKUP_SPACE_ID", "")

    if not api_key:
        raise ConfigurationError(
            "ClickUp API Key is required. "
            "Provide it via --api-key flag or CLICKUP_API_KEY environment variable"
        )
    if not space_id:
        raise ConfigurationError(
            "ClickUp Space ID is required. "
            "Provide it via --space-id flag or CLICKUP_SPACE_ID environment variable"
        )

    values = {"api_key": api_key, "space_id": space_id}

    if due_date_format is None:
        due_date_format = env.get("CLICKUP_DUE_DATE_FORMAT")
    if due_date_format:
        values["due_date_format"] = due_date_format

    if weekly_summary is None and env.get("CLICKUP_WEEKLY_SUMMARY"):
        weekly_summary = _parse_bool("CLICKUP_WEEKLY_SUMMARY", env["CLICKUP_WEEKLY_SUMMARY"])
    if weekly_summary is not None:
        values["weekly_summary"] = weekly_summary

    if timeout_seconds is None and env.get("CLICKUP_TIMEOUT"):
        timeout_seconds = _parse_float("CLICKUP_TIMEOUT", env["CLICKUP_TIMEOUT"])
    if timeout_seconds is not None:
        values["timeout_seconds"] = timeout_seconds

    if env.get("CLICKUP_API_BASE"):
        values["api_base"] = env["CLICKUP_API_BASE"]

    log_level = log_level or env.get("CLICKUP_LOG_LEVEL")
    if log_level:
        values["log_level"] = log_level

    try:
        return Settings(**values)
    except ValueError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
