"""Structural predicates backed by pydantic.

A predicate is any callable ``(value, name, subject_label)`` returning
``None`` on success or a message on failure. ``conforms_to`` builds one from
a type annotation using pydantic's ``TypeAdapter``, so arbitrary shapes
(unions, ``list[int]``, ``TypedDict``, dataclasses, models) can be checked
without writing a checker by hand.
"""

from collections.abc import Callable
import functools
import typing

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError


def required_message(name: str, subject_label: str) -> str:
    return (
        f"The `{name}` is marked as required in `{subject_label}`, "
        f"but its value is `None`."
    )


def _describe_errors(exc: PydanticValidationError) -> str:
    parts = []
    for error in exc.errors(include_url=False):
        loc = ".".join(str(p) for p in error["loc"])
        parts.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return ", ".join(parts)


@functools.cache
def _adapter(annotation: typing.Any) -> TypeAdapter[typing.Any]:
    return TypeAdapter(annotation)


def conforms_to(
    annotation: typing.Any, *, required: bool = True, strict: bool = True
) -> Callable[[typing.Any, str, str], str | None]:
    """Build a predicate checking values against ``annotation``.

    Args:
        annotation: Any type pydantic can validate.
        required: When True a ``None`` value fails with a "marked as
            required" message; when False ``None`` passes.
        strict: Validate in pydantic strict mode, so no coercion happens
            (``"1"`` is not an ``int``).

    Returns:
        A predicate usable as an expectation.
    """
    try:
        adapter = _adapter(annotation)
    except TypeError:
        # Unhashable annotations cannot be cached
        adapter = TypeAdapter(annotation)

    def predicate(value: typing.Any, name: str, subject_label: str) -> str | None:
        if value is None:
            return required_message(name, subject_label) if required else None
        try:
            adapter.validate_python(value, strict=strict)
        except PydanticValidationError as exc:
            return (
                f"Invalid `{name}` of type `{type(value).__name__}` supplied to "
                f"`{subject_label}`: {_describe_errors(exc)}"
            )
        return None

    predicate.__qualname__ = f"conforms_to({annotation!r})"
    return predicate
