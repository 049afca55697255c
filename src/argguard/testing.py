"""Test support helpers."""

from collections.abc import Callable
import typing

from argguard.boundary import render_failure, strip_stack
from argguard.config import current_settings
from argguard.exceptions import ValidationError


def expect_validation_error(call: Callable[[], typing.Any]) -> list[str]:
    """Run ``call`` expecting a ValidationError and return its messages.

    The messages are returned in declaration order with the appended stack
    text removed, so tests can compare them against plain strings.

    Raises:
        AssertionError: If ``call`` returns without raising.
    """
    try:
        call()
    except ValidationError as error:
        if error.failures:
            # Stack text may itself contain the separator; re-render per failure
            return [strip_stack(render_failure(d)) for d in error.failures]
        separator = current_settings().message_separator
        return [strip_stack(text) for text in str(error).split(separator)]
    raise AssertionError("No validation error occurred")
