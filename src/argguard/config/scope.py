"""Configuration scoping for programmatic overrides.

Settings are resolved from the environment on demand. ``settings_scope``
installs validated overrides in a context variable so the change is local to
the current thread or task and is undone when the block exits.
"""

from collections.abc import Generator
from contextlib import contextmanager
import contextvars
import logging
from typing import Any

from argguard.core.types import _require

from .schema import ArgGuardSettings

log = logging.getLogger(__name__)

_scoped_settings: contextvars.ContextVar[ArgGuardSettings] = contextvars.ContextVar(
    "argguard_settings"
)


def resolve_settings(**overrides: Any) -> ArgGuardSettings:
    """Resolve settings from the environment, applying programmatic overrides.

    Unknown keys are rejected here; the schema itself ignores unknown
    environment variables.

    Raises:
        TypeError: If an override names a setting that does not exist.
        pydantic.ValidationError: If any value fails schema validation.
    """
    unknown = sorted(set(overrides) - set(ArgGuardSettings.model_fields))
    _require(
        condition=not unknown,
        message=f"unknown setting(s) {unknown}",
        field_name="overrides",
        exc=TypeError,
    )
    return ArgGuardSettings(**overrides)


def current_settings() -> ArgGuardSettings:
    """Return the scoped settings, or settings resolved from the environment."""
    try:
        return _scoped_settings.get()
    except LookupError:
        return resolve_settings()


@contextmanager
def settings_scope(**overrides: Any) -> Generator[ArgGuardSettings]:
    """Temporarily override settings for validations run inside the block.

    Overrides are layered on top of the currently effective settings, so
    scopes nest.

    Example:
        with settings_scope(capture_stack=False):
            merge_scope({"user": 1}, {"user": 2})  # error without stack text
    """
    merged = {**current_settings().to_dict(), **overrides}
    settings = resolve_settings(**merged)
    log.debug("Entering settings scope with overrides %s", sorted(overrides))
    token = _scoped_settings.set(settings)
    try:
        yield settings
    finally:
        _scoped_settings.reset(token)
