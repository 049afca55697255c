"""Single-item validators.

Each validator checks one named value and returns an outcome: the value
itself wrapped in Success, or a Failure holding exactly one descriptor. They
never raise for bad data; raising is reserved for the public boundary.
"""

from __future__ import annotations

from collections.abc import Mapping
import typing

from argguard.core.kinds import is_kind_set, matches_any, resolve_kind_set
from argguard.core.types import (
    Failure,
    FailureDescriptor,
    FailureKind,
    Outcome,
    Success,
)
from argguard.formatting import capture_stack

MALFORMED_EXPECTATION_MESSAGE = "expectation must be a validating capability"
MALFORMED_PREDICATE_RESULT_MESSAGE = (
    "predicate must return None, a message or an exception"
)


class ItemValidator(typing.Protocol):
    """Signature shared by every per-item validator."""

    def __call__(
        self,
        subject_label: str,
        name: str,
        expectation: typing.Any,
        actual: typing.Any,
    ) -> Outcome[typing.Any]: ...


def _fail(
    kind: FailureKind,
    subject_label: str,
    name: str,
    expectation: typing.Any,
    actual: typing.Any,
    message: str | None = None,
) -> Failure:
    # Drop this helper and the validator that called it from the stack.
    return Failure(
        (
            FailureDescriptor(
                kind=kind,
                subject_label=subject_label,
                name=name,
                expectation=expectation,
                actual=actual,
                message=message,
                cause=capture_stack(skip=2),
            ),
        )
    )


def validate_item(
    subject_label: str, name: str, expectation: typing.Any, actual: typing.Any
) -> Outcome[typing.Any]:
    """Validate one value against a kind-set or a predicate.

    The strategy is chosen from the shape of ``expectation``:

    - a kind-set (collection of kinds, kind names or classes, a single Kind,
      kind name or class, or a union of classes) succeeds when ``actual``
      matches any member;
    - any other callable is a predicate, called as
      ``predicate(actual, name, subject_label)``; a returned message or
      exception fails the item with that message unchanged, and any other
      return value (a bool, say) is reported as a malformed expectation;
    - anything else is a coding error reported as a malformed expectation.
    """
    if is_kind_set(expectation):
        specs = resolve_kind_set(expectation)
        if specs is None:
            return _fail(
                FailureKind.MALFORMED_EXPECTATION,
                subject_label,
                name,
                expectation,
                actual,
                MALFORMED_EXPECTATION_MESSAGE,
            )
        if matches_any(specs, actual):
            return Success(actual)
        return _fail(
            FailureKind.TYPE_VIOLATION, subject_label, name, specs, actual
        )

    if callable(expectation):
        error = expectation(actual, name, subject_label)
        if error is None:
            return Success(actual)
        if not isinstance(error, str | BaseException):
            # True and False are not messages
            return _fail(
                FailureKind.MALFORMED_EXPECTATION,
                subject_label,
                name,
                expectation,
                actual,
                f"{MALFORMED_PREDICATE_RESULT_MESSAGE}, but it returned "
                f"{type(error).__name__}",
            )
        return _fail(
            FailureKind.PREDICATE_VIOLATION,
            subject_label,
            name,
            expectation,
            actual,
            str(error),
        )

    return _fail(
        FailureKind.MALFORMED_EXPECTATION,
        subject_label,
        name,
        expectation,
        actual,
        MALFORMED_EXPECTATION_MESSAGE,
    )


def reduce_identity(actual: typing.Any) -> typing.Any:
    """Replace an object exposing an ``id`` with that id.

    Mappings are checked for an ``"id"`` key, other objects for an ``id``
    attribute. A missing or ``None`` id leaves the value unchanged.
    """
    if isinstance(actual, Mapping):
        identity = actual.get("id")
    else:
        identity = getattr(actual, "id", None)
    return actual if identity is None else identity


def validate_scope_entry(
    subject_label: str, name: str, expected: typing.Any, actual: typing.Any
) -> Outcome[typing.Any]:
    """Check one scope key: the actual must be absent or equal ``expected``.

    ``None`` means the caller omitted the field and the scope fills it in
    later, so it always passes.
    """
    reduced = reduce_identity(actual)
    if reduced is None or reduced == expected:
        return Success(reduced)
    return _fail(FailureKind.SCOPE_MISMATCH, subject_label, name, expected, reduced)
