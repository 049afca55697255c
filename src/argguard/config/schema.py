"""Configuration schema and validation using Pydantic.

This module defines the settings schema that controls how failures are
rendered: the separator joining aggregated messages, whether call stacks are
captured, and how much of a value is shown when it is printed.
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ArgGuardSettings(BaseSettings):
    """Pydantic settings schema for argguard.

    Values are read from environment variables with the ``ARGGUARD_`` prefix
    and may be overridden programmatically with ``settings_scope``.
    """

    model_config = SettingsConfigDict(
        env_prefix="ARGGUARD_",
        env_file=None,
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    message_separator: str = Field(
        default="; ",
        description="Separator joining rendered failures in a raised error",
        min_length=1,
    )

    capture_stack: bool = Field(
        default=True,
        description="Capture the call stack for every failure",
    )

    stack_limit: int = Field(
        default=12,
        description="Number of innermost frames kept in a captured stack",
        ge=1,
    )

    repr_max_string: int = Field(
        default=120,
        description="Longest string shown when rendering an actual value",
        ge=8,
    )

    repr_max_level: int = Field(
        default=4,
        description="Deepest nesting shown when rendering an actual value",
        ge=1,
    )

    @field_validator("message_separator")
    @classmethod
    def reject_blank_separator(cls, v: str) -> str:
        """A whitespace-only separator would make messages unsplittable."""
        if not v.strip():
            raise ValueError("message_separator must contain a visible character")
        return v

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary."""
        return {
            "message_separator": self.message_separator,
            "capture_stack": self.capture_stack,
            "stack_limit": self.stack_limit,
            "repr_max_string": self.repr_max_string,
            "repr_max_level": self.repr_max_level,
        }
