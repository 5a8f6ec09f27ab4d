"""Tests for sort safelists and token resolution."""

import pytest

from atla.core.sorting import SortDirection, SortDirective, SortSafelist


@pytest.fixture
def safelist():
    return SortSafelist("id", "name", "age", "-id", "-name", "-age")


class TestSortSafelist:
    def test_membership_is_exact(self, safelist):
        assert "name" in safelist
        assert "-name" in safelist
        assert "Name" not in safelist
        assert "-NAME" not in safelist
        assert "name " not in safelist

    def test_descending_variant_must_be_declared(self):
        safelist = SortSafelist("id", "name")
        assert "-name" not in safelist

    def test_rejects_injection_shaped_tokens(self, safelist):
        assert "name; DROP TABLE characters" not in safelist
        assert "--name" not in safelist
        assert "" not in safelist
        assert None not in safelist

    def test_preserves_declared_order(self, safelist):
        assert list(safelist) == ["id", "name", "age", "-id", "-name", "-age"]
        assert len(safelist) == 6

    def test_both_ways(self):
        assert list(SortSafelist.both_ways("id", "title")) == ["id", "title", "-id", "-title"]

    def test_token_must_name_a_column(self):
        with pytest.raises(ValueError):
            SortSafelist("id", "name desc")


class TestResolve:
    def test_ascending(self, safelist):
        assert safelist.resolve("age") == SortDirective("age", SortDirection.ASC)

    def test_descending(self, safelist):
        directive = safelist.resolve("-age")
        assert directive.column == "age"
        assert directive.direction is SortDirection.DESC
        assert directive.descending

    def test_column_comes_from_the_declaration(self, safelist):
        class CallerToken(str):
            pass

        directive = safelist.resolve(CallerToken("-name"))
        assert type(directive.column) is str
        assert directive is safelist.resolve("-name")

    def test_unknown_token_raises(self, safelist):
        with pytest.raises(KeyError):
            safelist.resolve("nation")
