"""One-shot validation of an object's properties."""

from collections.abc import Mapping
import typing

from argguard.boundary import unwrap
from argguard.core.outcomes import combine_all
from argguard.core.types import _require
from argguard.validators.items import validate_item


def lookup(obj: typing.Any, key: str) -> typing.Any:
    """Read ``key`` from a mapping, or an attribute from any other object."""
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def validate_props[P](
    expected_shape: Mapping[str, typing.Any], subject_label: str, props: P
) -> P:
    """Validate every property named in ``expected_shape`` at once.

    Unlike ``wrap_with_validation`` there is no currying: the whole object is
    present, so each expectation is checked against ``props[name]`` (``None``
    when absent) and every failure is reported together.

    Args:
        expected_shape: Property name to expectation (kind-set or predicate).
        subject_label: Name of the object or component, for messages only.
        props: The mapping or object to validate.

    Returns:
        ``props`` itself, unchanged.

    Raises:
        ValidationError: If any property fails its expectation.
    """
    _require(
        condition=isinstance(expected_shape, Mapping),
        message="must be a mapping of property name to expectation",
        field_name="expected_shape",
        exc=TypeError,
    )
    outcomes = [
        validate_item(subject_label, name, expectation, lookup(props, name))
        for name, expectation in expected_shape.items()
    ]
    return unwrap(combine_all(outcomes, lambda *_values: props))
