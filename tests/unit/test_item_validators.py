"""Unit tests for the per-item validators."""

import pytest

from argguard import Failure, FailureKind, Kind, Success, settings_scope
from argguard.validators import (
    MALFORMED_EXPECTATION_MESSAGE,
    MALFORMED_PREDICATE_RESULT_MESSAGE,
    reduce_identity,
    validate_item,
    validate_scope_entry,
)


class _Record:
    def __init__(self, id):  # noqa: A002
        self.id = id


class TestKindSetStrategy:
    """Kind-set expectations."""

    @pytest.mark.unit
    def test_matching_value_succeeds_with_the_value(self):
        assert validate_item("f", "x", [Kind.STRING], "FOO") == Success("FOO")

    @pytest.mark.unit
    def test_any_member_is_enough(self):
        assert validate_item("f", "x", [Kind.OBJECT, Kind.STRING], "FOO") == Success(
            "FOO"
        )

    @pytest.mark.unit
    def test_mismatch_records_allowed_kinds_and_actual(self):
        outcome = validate_item("f", "x", [Kind.OBJECT, Kind.STRING], 1)

        assert isinstance(outcome, Failure)
        (descriptor,) = outcome.failures
        assert descriptor.kind is FailureKind.TYPE_VIOLATION
        assert descriptor.subject_label == "f"
        assert descriptor.name == "x"
        assert descriptor.expectation == (Kind.OBJECT, Kind.STRING)
        assert descriptor.actual == 1

    @pytest.mark.unit
    def test_bare_class_is_a_single_kind(self):
        assert validate_item("f", "x", int, 3) == Success(3)
        assert isinstance(validate_item("f", "x", int, "3"), Failure)

    @pytest.mark.unit
    def test_union_and_kind_name_are_kind_sets(self):
        assert validate_item("f", "x", int | None, None) == Success(None)
        assert validate_item("f", "x", "string", "FOO") == Success("FOO")

        (descriptor,) = validate_item("f", "x", int | str, 1.5).failures
        assert descriptor.kind is FailureKind.TYPE_VIOLATION
        assert descriptor.expectation == (int, str)


class TestPredicateStrategy:
    """Callable expectations."""

    @pytest.mark.unit
    def test_predicate_receives_value_name_and_label(self):
        seen = []

        def predicate(value, name, subject_label):
            seen.append((value, name, subject_label))

        assert validate_item("funky", "arg", predicate, 5) == Success(5)
        assert seen == [(5, "arg", "funky")]

    @pytest.mark.unit
    def test_returned_message_is_passed_through_unchanged(self):
        outcome = validate_item("f", "x", lambda *_: "Exactly this text.", 5)

        (descriptor,) = outcome.failures
        assert descriptor.kind is FailureKind.PREDICATE_VIOLATION
        assert descriptor.message == "Exactly this text."

    @pytest.mark.unit
    def test_returned_exception_uses_its_message(self):
        outcome = validate_item("f", "x", lambda *_: ValueError("nope"), 5)

        (descriptor,) = outcome.failures
        assert descriptor.message == "nope"

    @pytest.mark.unit
    @pytest.mark.parametrize("returned", [True, False, 0, ["a message"]])
    def test_non_message_return_is_a_malformed_predicate(self, returned):
        outcome = validate_item("f", "x", lambda *_: returned, 5)

        (descriptor,) = outcome.failures
        assert descriptor.kind is FailureKind.MALFORMED_EXPECTATION
        assert descriptor.message.startswith(MALFORMED_PREDICATE_RESULT_MESSAGE)
        assert type(returned).__name__ in descriptor.message

    @pytest.mark.unit
    def test_boolean_predicate_never_passes_by_accident(self):
        outcome = validate_item("f", "x", lambda v, n, s: isinstance(v, int), 5)

        (descriptor,) = outcome.failures
        assert descriptor.kind is FailureKind.MALFORMED_EXPECTATION
        assert descriptor.message.endswith("but it returned bool")


class TestMalformedExpectations:
    """Expectations that are neither kind-sets nor callables."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "expectation", [42, None, ["bogus"], [], "bogus", list[int]]
    )
    def test_malformed_expectation_is_reported(self, expectation):
        outcome = validate_item("f", "x", expectation, "value")

        (descriptor,) = outcome.failures
        assert descriptor.kind is FailureKind.MALFORMED_EXPECTATION
        assert descriptor.message == MALFORMED_EXPECTATION_MESSAGE


class TestStackCapture:
    """Captured causes on failures."""

    @pytest.mark.unit
    def test_failure_carries_stack_text(self):
        outcome = validate_item("f", "x", [Kind.STRING], 1)
        (descriptor,) = outcome.failures
        assert descriptor.cause
        assert "test_failure_carries_stack_text" in descriptor.cause

    @pytest.mark.unit
    def test_stack_capture_can_be_disabled(self):
        with settings_scope(capture_stack=False):
            outcome = validate_item("f", "x", [Kind.STRING], 1)
        (descriptor,) = outcome.failures
        assert descriptor.cause is None


class TestScopeEntries:
    """Identity checks used by merge_scope."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("actual", "expected"),
        [
            ({"id": 1, "name": "kenny"}, 1),
            (_Record(1), 1),
            (7, 7),
            ({"name": "no id"}, {"name": "no id"}),
            (_Record(None), None),
        ],
    )
    def test_reduce_identity(self, actual, expected):
        reduced = reduce_identity(actual)
        if expected is None:
            assert reduced is actual
        else:
            assert reduced == expected

    @pytest.mark.unit
    def test_missing_value_satisfies_the_scope(self):
        assert validate_scope_entry("obj", "user", 1, None) == Success(None)

    @pytest.mark.unit
    def test_matching_id_satisfies_the_scope(self):
        assert validate_scope_entry("obj", "user", 1, {"id": 1}) == Success(1)

    @pytest.mark.unit
    def test_different_value_fails_with_reduced_actual(self):
        outcome = validate_scope_entry("obj", "user", 1, {"id": 5})

        (descriptor,) = outcome.failures
        assert descriptor.kind is FailureKind.SCOPE_MISMATCH
        assert descriptor.expectation == 1
        assert descriptor.actual == 5
