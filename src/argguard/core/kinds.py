"""Closed set of runtime kinds used by kind-set expectations.

A kind-set expectation lists the acceptable kinds for one value, for example
``{Kind.STRING, Kind.OBJECT}``. Members may also be given by name
(``"string"``) or as a Python class, which is checked with ``isinstance``.
A union of classes such as ``int | None`` is the kind-set of its members.
"""

from __future__ import annotations

from collections.abc import Sequence
import enum
import numbers
import types
import typing


class Kind(enum.Enum):
    """Runtime kind tags recognised by the kind-set strategy."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    FUNCTION = "function"
    NULL = "null"

    def matches(self, value: typing.Any) -> bool:  # noqa: PLR0911
        """Return True when ``value`` belongs to this kind.

        ``OBJECT`` accepts anything that is neither ``None`` nor a primitive,
        so mappings, sequences, callables and class instances all qualify.
        """
        match self:
            case Kind.NULL:
                return value is None
            case Kind.BOOLEAN:
                return isinstance(value, bool)
            case Kind.NUMBER:
                return isinstance(value, numbers.Number) and not isinstance(
                    value, bool
                )
            case Kind.STRING:
                return isinstance(value, str)
            case Kind.ARRAY:
                return isinstance(value, Sequence) and not isinstance(
                    value, str | bytes | bytearray
                )
            case Kind.FUNCTION:
                return callable(value)
            case Kind.OBJECT:
                return value is not None and not _is_primitive(value)
        return False  # pragma: no cover - exhaustive match


_PRIMITIVES = (str, bytes, bytearray, bool, numbers.Number)


def _is_primitive(value: typing.Any) -> bool:
    return isinstance(value, _PRIMITIVES)


KindSpec = Kind | type
"""A single member of a kind-set after resolution."""


def kind_of(value: typing.Any) -> Kind:
    """Classify ``value`` into its most specific Kind."""
    for kind in (
        Kind.NULL,
        Kind.BOOLEAN,
        Kind.NUMBER,
        Kind.STRING,
        Kind.ARRAY,
        Kind.FUNCTION,
    ):
        if kind.matches(value):
            return kind
    return Kind.OBJECT


def _is_type_form(expectation: typing.Any) -> bool:
    return typing.get_origin(expectation) is not None


def _is_union(expectation: typing.Any) -> bool:
    return isinstance(expectation, types.UnionType) or (
        typing.get_origin(expectation) is typing.Union
    )


def resolve_kind(member: typing.Any) -> KindSpec | None:
    """Resolve one kind-set member, or None when it is not recognised.

    Parameterised generics such as ``list[int]`` are not classes that
    ``isinstance`` accepts, so they are not recognised.
    """
    if isinstance(member, Kind):
        return member
    if _is_type_form(member):
        return None
    if isinstance(member, type):
        return member
    if isinstance(member, str):
        try:
            return Kind(member.lower())
        except ValueError:
            return None
    return None


def is_kind_set(expectation: typing.Any) -> bool:
    """True when ``expectation`` is shaped like a kind-set.

    A bare Kind, kind name or class counts as a one-element set, and a union
    such as ``int | None`` as the set of its members. Classes and generic
    aliases are callable, so this check must run before the predicate
    strategy is considered; a generic alias then resolves as malformed.
    """
    return _is_type_form(expectation) or isinstance(
        expectation, Kind | type | str | set | frozenset | list | tuple
    )


def resolve_kind_set(expectation: typing.Any) -> tuple[KindSpec, ...] | None:
    """Resolve a kind-set expectation, or None when any member is unknown."""
    if _is_union(expectation):
        members = typing.get_args(expectation)
    elif _is_type_form(expectation) or isinstance(expectation, Kind | type | str):
        members = (expectation,)
    else:
        members = tuple(expectation)
    if not members:
        return None
    resolved = tuple(resolve_kind(member) for member in members)
    if any(spec is None for spec in resolved):
        return None
    if isinstance(expectation, set | frozenset):
        # Unordered input; sort so rendered messages are stable across runs.
        resolved = tuple(sorted(resolved, key=_spec_label))
    return typing.cast(tuple[KindSpec, ...], resolved)


def _spec_label(spec: KindSpec) -> str:
    return spec.value if isinstance(spec, Kind) else spec.__name__


def matches_any(specs: tuple[KindSpec, ...], value: typing.Any) -> bool:
    """True when ``value`` satisfies at least one resolved kind."""
    for spec in specs:
        if isinstance(spec, Kind):
            if spec.matches(value):
                return True
        elif isinstance(value, spec):
            return True
    return False


def describe_kinds(specs: tuple[KindSpec, ...]) -> str:
    """Human-readable list of kinds, in declaration order."""
    return ", ".join(_spec_label(spec) for spec in specs)
