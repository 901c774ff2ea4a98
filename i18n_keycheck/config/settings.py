"""Checker configuration models."""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ErrorLevel(str, Enum):
    """Severity applied to missing keys."""
    OFF = "off"
    WARN = "warn"
    ERROR = "error"


class CheckerConfig(BaseModel):
    """Validator configuration.

    Field names accept both the snake_case attribute names and the camelCase
    spelling used by JavaScript config files (``errorLevel``, ``ignoreKeys``).
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    error_level: ErrorLevel = Field(default=ErrorLevel.WARN, alias="errorLevel")
    ignore_keys: List[str] = Field(default_factory=list, alias="ignoreKeys")

    @field_validator("error_level", mode="before")
    @classmethod
    def normalize_error_level(cls, v):
        """Accept level names regardless of case."""
        # YAML 1.1 loads a bare `off` as False
        if v is False:
            return ErrorLevel.OFF
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("ignore_keys")
    @classmethod
    def validate_ignore_keys(cls, v):
        """Drop empty entries; the rest are matched verbatim."""
        return [key for key in v if key]

    def with_overrides(self, error_level=None, ignore_keys=None) -> "CheckerConfig":
        """Return a copy with CLI overrides applied.

        Extra ignore keys are appended to the configured ones.
        """
        data = self.model_dump()
        if error_level is not None:
            data["error_level"] = error_level
        if ignore_keys:
            data["ignore_keys"] = data["ignore_keys"] + list(ignore_keys)
        return CheckerConfig.model_validate(data)
