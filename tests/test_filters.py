"""Tests for filter normalization."""

import pytest

from atla.core.filters import Comparator, FilterField, FilterSet, Predicate, is_unset


@pytest.fixture
def character_filters():
    return FilterSet(
        FilterField("name", Comparator.IEXACT),
        FilterField("age_from", Comparator.GTE, column="age"),
        FilterField("age_to", Comparator.LTE, column="age"),
    )


class TestIsUnset:
    @pytest.mark.parametrize("value", [None, "", 0, 0.0])
    def test_zero_values(self, value):
        assert is_unset(value)

    @pytest.mark.parametrize("value", ["a", " ", 1, -1, 0.5])
    def test_real_values(self, value):
        assert not is_unset(value)


class TestFilterSet:
    def test_all_zero_values_emit_nothing(self, character_filters):
        assert character_filters.normalize({"name": "", "age_from": 0, "age_to": 0}) == ()

    def test_missing_keys_emit_nothing(self, character_filters):
        assert character_filters.normalize({}) == ()

    def test_each_set_field_emits_one_predicate(self, character_filters):
        predicates = character_filters.normalize({"name": "Katara", "age_from": 12, "age_to": 0})
        assert predicates == (
            Predicate("name", Comparator.IEXACT, "Katara"),
            Predicate("age", Comparator.GTE, 12),
        )

    def test_field_targets_declared_column(self, character_filters):
        (predicate,) = character_filters.normalize({"age_to": 30})
        assert predicate.column == "age"
        assert predicate.comparator is Comparator.LTE

    def test_undeclared_keys_are_ignored(self, character_filters):
        assert character_filters.normalize({"nation; --": "Fire Nation"}) == ()

    def test_zero_bound_is_unbounded(self, character_filters):
        # A literal zero cannot be filtered for; it reads as "no bound"
        predicates = character_filters.normalize({"age_from": 0, "age_to": 5})
        assert [p.comparator for p in predicates] == [Comparator.LTE]

    def test_names(self, character_filters):
        assert character_filters.names == ("name", "age_from", "age_to")
