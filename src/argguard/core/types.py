"""Core data types that flow through validation.

This module defines the immutable records produced while a wrapped call is
being checked: per-item outcomes, the failure descriptors they carry, and the
named expectations supplied at wrap time. Every record is created fresh for a
single call and discarded once the boundary has translated it.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import dataclasses
import enum
import typing

# --- Minimal guard helpers (clarity > boilerplate) ---

TSuccess = typing.TypeVar("TSuccess")


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = ValueError,
    field_name: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors."""
    if not condition:
        if field_name:
            enhanced_message = f"{field_name}: {message}"
            raise exc(enhanced_message)
        raise exc(message)


class _Missing:
    """Marker for "no value was produced", distinct from ``None``."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: typing.Final = _Missing()


class Predicate(typing.Protocol):
    """Structural checker consumed by the predicate strategy.

    Returns ``None`` when ``value`` is acceptable, otherwise a message or an
    exception describing the problem. The message is surfaced unchanged.
    """

    def __call__(
        self, value: typing.Any, name: str, subject_label: str
    ) -> str | BaseException | None: ...


# --- Failure records ---


class FailureKind(enum.Enum):
    """Category of a single validation failure."""

    TYPE_VIOLATION = "type_violation"
    PREDICATE_VIOLATION = "predicate_violation"
    MALFORMED_EXPECTATION = "malformed_expectation"
    SCOPE_MISMATCH = "scope_mismatch"
    ARITY_MISMATCH = "arity_mismatch"
    ARGUMENT_COUNT = "argument_count"
    INVARIANT = "invariant"

    @property
    def is_arity_error(self) -> bool:
        return self in (FailureKind.ARITY_MISMATCH, FailureKind.ARGUMENT_COUNT)


@dataclasses.dataclass(frozen=True, slots=True)
class FailureDescriptor:
    """Structured description of one failed expectation.

    String rendering happens at the boundary; internally a failure always
    keeps the raw expectation and actual value so callers composing outcomes
    can inspect them.
    """

    kind: FailureKind
    subject_label: str
    name: str | None
    expectation: typing.Any
    actual: typing.Any
    message: str | None = None
    cause: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants for type safety."""
        _require(
            condition=isinstance(self.kind, FailureKind),
            message="must be a FailureKind",
            field_name="kind",
            exc=TypeError,
        )
        _require(
            condition=isinstance(self.subject_label, str),
            message="must be str",
            field_name="subject_label",
            exc=TypeError,
        )


# --- Result Monad for accumulated validation ---
# A Failure always carries at least one descriptor, in the order the
# expectations were declared.


@dataclasses.dataclass(frozen=True, slots=True)
class Success[TSuccess]:
    """A validated value, or the result of calling the wrapped function."""

    value: TSuccess


@dataclasses.dataclass(frozen=True, slots=True)
class Failure:
    """Every failure collected while validating one call."""

    failures: tuple[FailureDescriptor, ...]

    def __post_init__(self) -> None:
        """Validate that a failure is never empty."""
        _require(
            condition=isinstance(self.failures, tuple)
            and all(isinstance(f, FailureDescriptor) for f in self.failures),
            message="must be a tuple[FailureDescriptor, ...]",
            field_name="failures",
            exc=TypeError,
        )
        _require(
            condition=len(self.failures) > 0,
            message="must contain at least one descriptor",
            field_name="failures",
        )


Outcome = Success[TSuccess] | Failure

# --- Expectations ---


@dataclasses.dataclass(frozen=True, slots=True)
class NamedExpectation:
    """An expectation paired with the display name of what it checks."""

    name: str
    expectation: typing.Any

    def __post_init__(self) -> None:
        """Validate invariants for type safety."""
        _require(
            condition=isinstance(self.name, str) and self.name != "",
            message="must be a non-empty str",
            field_name="name",
            exc=TypeError,
        )

    @classmethod
    def coerce(cls, item: typing.Any) -> NamedExpectation:
        """Accept either a NamedExpectation or a ``(name, expectation)`` pair."""
        if isinstance(item, NamedExpectation):
            return item
        _require(
            condition=isinstance(item, tuple | list) and len(item) == 2,
            message=f"must be a (name, expectation) pair, got {item!r}",
            field_name="named expectation",
            exc=TypeError,
        )
        name, expectation = item
        return cls(name, expectation)


def normalize_expectations(
    items: Iterable[typing.Any],
) -> tuple[NamedExpectation, ...]:
    """Freeze caller-supplied expectations into a tuple of NamedExpectation."""
    _require(
        condition=not isinstance(items, str | bytes | Mapping),
        message="must be a sequence of (name, expectation) pairs",
        field_name="named_expectations",
        exc=TypeError,
    )
    return tuple(NamedExpectation.coerce(item) for item in items)
