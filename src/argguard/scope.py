"""Scope agreement check and merge.

A scope is a small set of identity values, such as the current user and
project ids, that an object must either omit or agree with. Omitted keys are
filled in from the scope.
"""

from collections.abc import Mapping
import dataclasses
import typing

from argguard.boundary import unwrap
from argguard.core.outcomes import combine_all
from argguard.core.types import Failure, Outcome, _require
from argguard.formatting import safe_repr
from argguard.props import lookup
from argguard.validators.items import validate_scope_entry


def merge_scope(
    scope: Mapping[str, typing.Any], obj: Mapping[str, typing.Any]
) -> dict[str, typing.Any]:
    """Validate ``obj`` against ``scope`` and return the shallow merge.

    Each scope key in ``obj`` must be missing, ``None``, equal to the scope
    value, or an object whose ``id`` equals it. Neither argument is mutated.

    Args:
        scope: Key to identity value, e.g. ``{"user": 1, "project": 2}``.
        obj: The object to validate, e.g. ``{"user": {"id": 1}}``.

    Returns:
        A new dict of ``obj``'s items with ``scope`` applied on top.

    Raises:
        ValidationError: If any key disagrees. Nothing is merged.
    """
    _require(
        condition=isinstance(scope, Mapping),
        message="must be a mapping",
        field_name="scope",
        exc=TypeError,
    )
    _require(
        condition=isinstance(obj, Mapping),
        message="must be a mapping",
        field_name="obj",
        exc=TypeError,
    )
    outcomes = [
        validate_scope_entry("", key, expected, lookup(obj, key))
        for key, expected in scope.items()
    ]
    outcome = combine_all(outcomes, lambda *_ids: {**obj, **scope})
    return unwrap(_label_failures(outcome, obj))


def _label_failures(
    outcome: Outcome[dict[str, typing.Any]], obj: Mapping[str, typing.Any]
) -> Outcome[dict[str, typing.Any]]:
    # The object is rendered only once something has failed
    if not isinstance(outcome, Failure):
        return outcome
    subject_label = safe_repr(obj)
    return Failure(
        tuple(
            dataclasses.replace(descriptor, subject_label=subject_label)
            for descriptor in outcome.failures
        )
    )
