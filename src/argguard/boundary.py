"""Translation of aggregate outcomes into return values or raised errors.

This is the only place where failures become strings and where exceptions are
raised. Everything upstream works with ``Success``/``Failure`` values so that
sibling failures can be accumulated instead of stopping at the first one.
"""

from __future__ import annotations

import logging
import typing

from argguard.config import current_settings
from argguard.core.kinds import describe_kinds
from argguard.core.types import (
    MISSING,
    Failure,
    FailureDescriptor,
    FailureKind,
    Outcome,
    Success,
)
from argguard.exceptions import (
    ArityMismatchError,
    InvariantViolationError,
    ValidationError,
)
from argguard.formatting import safe_repr

log = logging.getLogger(__name__)

STACK_MARKER = ", Stack: "


def describe_failure(descriptor: FailureDescriptor) -> str:
    """Render the human-readable part of a failure, without stack text."""
    label = descriptor.subject_label
    name = descriptor.name
    match descriptor.kind:
        case FailureKind.TYPE_VIOLATION:
            return (
                f"Function {label}, Requires {name} as one of "
                f"{describe_kinds(descriptor.expectation)}, "
                f"but got {safe_repr(descriptor.actual)}"
            )
        case FailureKind.PREDICATE_VIOLATION:
            return f"Failed {name} for {label}: {descriptor.message}"
        case FailureKind.MALFORMED_EXPECTATION:
            return (
                f"Function {label}, {name}: {descriptor.message}, "
                f"got {safe_repr(descriptor.expectation)}"
            )
        case FailureKind.SCOPE_MISMATCH:
            return (
                f"{label}, Requires {name} to equal "
                f"{safe_repr(descriptor.expectation)}, "
                f"but got {safe_repr(descriptor.actual)}"
            )
        case _:
            return f"Function {label}: {descriptor.message}"


def render_failure(descriptor: FailureDescriptor, *, include_stack: bool = True) -> str:
    """Render one failure, appending its captured stack when present."""
    text = describe_failure(descriptor)
    if include_stack and descriptor.cause:
        return f"{text}{STACK_MARKER}{descriptor.cause}"
    return text


def strip_stack(rendered: str) -> str:
    """Remove the diagnostic stack text appended by ``render_failure``."""
    index = rendered.find(STACK_MARKER)
    return rendered if index < 0 else rendered[:index]


def to_exception(failure: Failure) -> ValidationError:
    """Build the single error reporting every failure in ``failure``."""
    settings = current_settings()
    rendered = [render_failure(d) for d in failure.failures]
    message = settings.message_separator.join(rendered)
    messages = tuple(describe_failure(d) for d in failure.failures)
    if any(d.kind.is_arity_error for d in failure.failures):
        return ArityMismatchError(message, failure.failures, messages)
    return ValidationError(message, failure.failures, messages)


def unwrap[R](outcome: Outcome[R]) -> R:
    """Return the success payload or raise the aggregated failure.

    Raises:
        ValidationError: If ``outcome`` is a Failure. ``ArityMismatchError``
            is raised instead when the failure is an arity problem.
        InvariantViolationError: If a Success carries no value, which means
            a fold dropped its payload.
    """
    if isinstance(outcome, Success):
        if outcome.value is MISSING:
            raise InvariantViolationError(
                "validation succeeded without producing a value"
            )
        return typing.cast(R, outcome.value)
    if isinstance(outcome, Failure):
        error = to_exception(outcome)
        log.debug(
            "Validation failed with %d failure(s): %s",
            len(outcome.failures),
            "; ".join(error.messages),
        )
        raise error
    raise InvariantViolationError(
        f"expected Success or Failure, got {type(outcome).__name__}"
    )
