"""Folding of per-item outcomes into one aggregate outcome."""

from __future__ import annotations

from collections.abc import Callable, Sequence
import typing

from .types import Failure, FailureDescriptor, Outcome, Success

R = typing.TypeVar("R")


def collect_failures(
    outcomes: Sequence[Outcome[typing.Any]],
) -> tuple[FailureDescriptor, ...]:
    """Gather the descriptors of every failing outcome, preserving order."""
    return tuple(
        descriptor
        for outcome in outcomes
        if isinstance(outcome, Failure)
        for descriptor in outcome.failures
    )


def combine_all(
    outcomes: Sequence[Outcome[typing.Any]], func: Callable[..., R]
) -> Outcome[R]:
    """Apply ``func`` to all success values, or collect every failure.

    This is an N-ary lift over the outcome type: ``func`` runs only when each
    outcome is a Success. Failing outcomes never short-circuit the fold; the
    aggregate Failure lists all of them in the order they were given.
    """
    failures = collect_failures(outcomes)
    if failures:
        return Failure(failures)
    values = [typing.cast(Success[typing.Any], outcome).value for outcome in outcomes]
    return Success(func(*values))
