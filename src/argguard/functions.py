"""Validating wrappers for plain functions.

Validation failures are coding errors, not I/O errors, so these wrappers
raise instead of returning a result the caller would have to inspect.

Example:
    def describe(kind, ret, obj):
        return {"type": kind, "ret": ret, "obj": obj}

    checked = wrap_with_validation(
        describe,
        [
            ("type", [Kind.STRING]),
            ("ret", [Kind.OBJECT, Kind.STRING]),
            ("obj", [Kind.OBJECT]),
        ],
        "describe",
    )
    checked("FOO")({"a": 1}, {"b": 2})  # curried intake
    checked(None, 1, None)  # raises ValidationError listing all three
"""

from collections.abc import Callable, Iterable
import typing

from argguard.boundary import unwrap
from argguard.composer import CurriedValidator, compose


def wrap_with_validation(
    func: Callable[..., typing.Any],
    named_expectations: Iterable[typing.Any],
    subject_label: str | None = None,
) -> CurriedValidator:
    """Wrap ``func`` so every argument is validated before it is called.

    Args:
        func: The function to validate and call.
        named_expectations: ``(name, expectation)`` pairs in argument order.
            An expectation is a kind-set (e.g. ``[Kind.OBJECT, str]``) or a
            predicate such as ``conforms_to(int)``.
        subject_label: Name used in error messages. Defaults to the
            function's qualified name.

    Returns:
        A curried callable returning ``func``'s result once all arguments
        are supplied and valid.

    Raises:
        ValidationError: When called with arguments that fail validation.
        ArityMismatchError: When the argument counts disagree.
    """
    return compose(func, named_expectations, subject_label, finish=unwrap)


def validated(
    *named_expectations: tuple[str, typing.Any], label: str | None = None
) -> Callable[[Callable[..., typing.Any]], CurriedValidator]:
    """Decorator form of ``wrap_with_validation``.

    Example:
        @validated(("name", [Kind.STRING]), ("age", [Kind.NUMBER]))
        def greet(name, age):
            ...
    """

    def decorator(func: Callable[..., typing.Any]) -> CurriedValidator:
        return wrap_with_validation(func, named_expectations, label)

    return decorator
