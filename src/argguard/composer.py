"""Arity-matched, curried composition of item validators.

``compose`` turns a function of declared arity N and N named expectations
into a ``CurriedValidator``. The validator accepts positional arguments in as
many calls as the caller likes; once N have been received it validates them
all, folds the per-item outcomes and, if every item passed, calls the
function. The composer itself never raises for bad input: arity problems and
validation failures come back as a ``Failure`` for the boundary to report.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
import dataclasses
import functools
import inspect
import logging
import typing

from argguard.core.outcomes import combine_all
from argguard.core.types import (
    Failure,
    FailureDescriptor,
    FailureKind,
    NamedExpectation,
    Outcome,
    _require,
    normalize_expectations,
)
from argguard.formatting import capture_stack
from argguard.validators.items import ItemValidator, validate_item

log = logging.getLogger(__name__)

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def declared_arity(func: Callable[..., typing.Any]) -> int | None:
    """Count positional parameters without defaults, or None if unknowable."""
    try:
        sig = inspect.signature(func)
    except (ValueError, TypeError):
        # Some builtins have no introspectable signature
        return None
    return sum(
        1
        for p in sig.parameters.values()
        if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty
    )


def _subject_label(func: Callable[..., typing.Any], subject_label: str | None) -> str:
    if subject_label is not None:
        return subject_label
    return getattr(func, "__qualname__", None) or getattr(func, "__name__", "(unnamed)")


@dataclasses.dataclass(frozen=True, slots=True)
class _Plan:
    """Everything fixed at wrap time; shared by all stages of one wrapper."""

    func: Callable[..., typing.Any]
    expectations: tuple[NamedExpectation, ...]
    subject_label: str
    arity: int
    item_validator: ItemValidator

    @property
    def arity_matches(self) -> bool:
        return self.arity == len(self.expectations)

    def run(self, received: tuple[typing.Any, ...]) -> Outcome[typing.Any]:
        """Validate a complete argument tuple and fold the outcomes."""
        if not self.arity_matches:
            return self._mismatch(
                FailureKind.ARITY_MISMATCH,
                received,
                f"argument length {self.arity} is not matched by validators' "
                f"length {len(self.expectations)}: "
                f"{[e.name for e in self.expectations]}",
            )
        if len(received) != len(self.expectations):
            return self._mismatch(
                FailureKind.ARGUMENT_COUNT,
                received,
                f"wrong number of arguments provided, expected "
                f"{len(self.expectations)} but got {len(received)}",
            )
        outcomes = [
            self.item_validator(
                self.subject_label, named.name, named.expectation, actual
            )
            for named, actual in zip(self.expectations, received, strict=True)
        ]
        return combine_all(outcomes, self.func)

    def _mismatch(
        self, kind: FailureKind, received: tuple[typing.Any, ...], message: str
    ) -> Failure:
        return Failure(
            (
                FailureDescriptor(
                    kind=kind,
                    subject_label=self.subject_label,
                    name=None,
                    expectation=self.expectations,
                    actual=received,
                    message=message,
                    cause=capture_stack(skip=3),
                ),
            )
        )


class CurriedValidator:
    """One stage of curried argument intake.

    Stages are immutable: applying arguments returns a new stage (or the
    final result) and leaves this one reusable, so a partially applied
    validator can be called any number of times.
    """

    def __init__(
        self,
        plan: _Plan,
        finish: Callable[[Outcome[typing.Any]], typing.Any],
        received: tuple[typing.Any, ...] = (),
    ) -> None:
        self._plan = plan
        self._finish = finish
        self._received = received
        functools.update_wrapper(self, plan.func, updated=())

    @property
    def arity(self) -> int:
        return self._plan.arity

    @property
    def received(self) -> tuple[typing.Any, ...]:
        return self._received

    @property
    def remaining(self) -> int:
        return max(self._plan.arity - len(self._received), 0)

    def __call__(self, *args: typing.Any) -> typing.Any:
        received = (*self._received, *args)
        if len(received) < self._plan.arity:
            return CurriedValidator(self._plan, self._finish, received)
        return self._finish(self._plan.run(received))

    def __repr__(self) -> str:
        return (
            f"<CurriedValidator {self._plan.subject_label} "
            f"{len(self._received)}/{self._plan.arity}>"
        )


def _identity(outcome: Outcome[typing.Any]) -> Outcome[typing.Any]:
    return outcome


def compose(
    func: Callable[..., typing.Any],
    named_expectations: Iterable[typing.Any],
    subject_label: str | None = None,
    *,
    item_validator: ItemValidator = validate_item,
    finish: Callable[[Outcome[typing.Any]], typing.Any] = _identity,
) -> CurriedValidator:
    """Build a curried validator for ``func``.

    Args:
        func: The function to call once every argument has validated.
        named_expectations: ``(name, expectation)`` pairs, one per argument
            of ``func`` in positional order.
        subject_label: Display name used in failures. Defaults to the
            function's qualified name.
        item_validator: Validator applied to each argument.
        finish: Applied to the aggregate outcome once the arity is
            satisfied. The default returns the outcome unchanged; the public
            wrappers pass the raising boundary instead.

    Returns:
        A ``CurriedValidator`` that collects arguments until the declared
        arity of ``func`` is reached. When the declared arity does not match
        the expectation count, the validator still curries on the declared
        arity but always yields an arity-mismatch failure.
    """
    _require(
        condition=callable(func),
        message="must be callable",
        field_name="func",
        exc=TypeError,
    )
    expectations = normalize_expectations(named_expectations)
    arity = declared_arity(func)
    if arity is None:
        arity = len(expectations)
    plan = _Plan(
        func=func,
        expectations=expectations,
        subject_label=_subject_label(func, subject_label),
        arity=arity,
        item_validator=item_validator,
    )
    if not plan.arity_matches:
        log.debug(
            "Function %s declares %d argument(s) but %d expectation(s) were given",
            plan.subject_label,
            arity,
            len(expectations),
        )
    return CurriedValidator(plan, finish)
