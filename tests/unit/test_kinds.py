"""Unit tests for the runtime kind checker."""

import pytest

from argguard import Kind, kind_of
from argguard.core.kinds import (
    describe_kinds,
    is_kind_set,
    matches_any,
    resolve_kind_set,
)


class _Thing:
    pass


class TestKindOf:
    """Classification of runtime values into kinds."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, Kind.NULL),
            (True, Kind.BOOLEAN),
            (0, Kind.NUMBER),
            (1.5, Kind.NUMBER),
            ("text", Kind.STRING),
            ([1, 2], Kind.ARRAY),
            ((1,), Kind.ARRAY),
            (len, Kind.FUNCTION),
            ({"a": 1}, Kind.OBJECT),
            (_Thing(), Kind.OBJECT),
        ],
    )
    def test_kind_of_classifies_values(self, value, expected):
        assert kind_of(value) is expected

    @pytest.mark.unit
    def test_bool_is_not_a_number(self):
        assert not Kind.NUMBER.matches(True)
        assert Kind.BOOLEAN.matches(False)

    @pytest.mark.unit
    def test_object_excludes_none_and_primitives(self):
        assert Kind.OBJECT.matches({"foo": "foo"})
        assert Kind.OBJECT.matches([1])
        assert Kind.OBJECT.matches(_Thing())
        assert not Kind.OBJECT.matches(None)
        assert not Kind.OBJECT.matches("FOO")
        assert not Kind.OBJECT.matches(1)

    @pytest.mark.unit
    def test_strings_are_not_arrays(self):
        assert not Kind.ARRAY.matches("abc")
        assert not Kind.ARRAY.matches(b"abc")


class TestKindSets:
    """Resolution and matching of kind-set expectations."""

    @pytest.mark.unit
    def test_bare_kind_and_class_are_kind_sets(self):
        assert is_kind_set(Kind.STRING)
        assert is_kind_set(str)
        assert is_kind_set([Kind.STRING, Kind.OBJECT])
        assert not is_kind_set(lambda *_: None)
        assert not is_kind_set(42)

    @pytest.mark.unit
    def test_members_resolve_from_names_kinds_and_classes(self):
        specs = resolve_kind_set(["STRING", Kind.NUMBER, dict])
        assert specs == (Kind.STRING, Kind.NUMBER, dict)

    @pytest.mark.unit
    @pytest.mark.parametrize("expectation", [[], ["bogus"], [Kind.STRING, 3]])
    def test_unrecognised_or_empty_sets_do_not_resolve(self, expectation):
        assert resolve_kind_set(expectation) is None

    @pytest.mark.unit
    def test_unordered_sets_render_deterministically(self):
        specs = resolve_kind_set({Kind.STRING, Kind.OBJECT, Kind.ARRAY})
        assert describe_kinds(specs) == "array, object, string"

    @pytest.mark.unit
    def test_lists_keep_declaration_order(self):
        specs = resolve_kind_set([Kind.OBJECT, Kind.STRING])
        assert describe_kinds(specs) == "object, string"

    @pytest.mark.unit
    def test_classes_match_with_isinstance(self):
        specs = resolve_kind_set([_Thing])
        assert matches_any(specs, _Thing())
        assert not matches_any(specs, object())
        assert describe_kinds(specs) == "_Thing"

    @pytest.mark.unit
    def test_bare_kind_name_is_a_kind_set(self):
        assert is_kind_set("string")
        assert resolve_kind_set("string") == (Kind.STRING,)
        assert resolve_kind_set("bogus") is None

    @pytest.mark.unit
    def test_unions_resolve_to_their_members(self):
        assert is_kind_set(int | str)
        assert resolve_kind_set(int | str) == (int, str)
        assert resolve_kind_set(int | None) == (int, type(None))

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "expectation", [list[int], dict[str, int], list[int] | None]
    )
    def test_generic_aliases_do_not_resolve(self, expectation):
        assert is_kind_set(expectation)
        assert resolve_kind_set(expectation) is None
