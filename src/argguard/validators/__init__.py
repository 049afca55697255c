"""Per-item validators used by the composer and the public entry points."""

from .items import (
    MALFORMED_EXPECTATION_MESSAGE,
    MALFORMED_PREDICATE_RESULT_MESSAGE,
    ItemValidator,
    reduce_identity,
    validate_item,
    validate_scope_entry,
)

__all__ = [
    "MALFORMED_EXPECTATION_MESSAGE",
    "MALFORMED_PREDICATE_RESULT_MESSAGE",
    "ItemValidator",
    "reduce_identity",
    "validate_item",
    "validate_scope_entry",
]
