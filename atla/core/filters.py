"""Filter declarations and normalization into query predicates.

Each list endpoint declares a :class:`FilterSet`. Raw values from the query
string go in, a tuple of :class:`Predicate` comes out; the repository ANDs
them together. An empty or zero value means "no constraint on this field",
so a literal zero cannot be filtered for.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Comparator(str, Enum):
    IEXACT = "iexact"      # case-insensitive equality
    EXACT = "exact"
    CONTAINS = "contains"  # case-sensitive substring
    GTE = "gte"
    LTE = "lte"


@dataclass(frozen=True)
class Predicate:
    column: str
    comparator: Comparator
    value: Any


@dataclass(frozen=True)
class FilterField:
    """One caller-facing filter parameter and the column it constrains."""

    name: str
    comparator: Comparator = Comparator.EXACT
    column: str | None = None

    @property
    def target(self) -> str:
        return self.column or self.name


def is_unset(value: Any) -> bool:
    """True for the values that mean "no constraint": None, "" and 0."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return False


class FilterSet:
    __slots__ = ("_fields",)

    def __init__(self, *fields: FilterField):
        self._fields: tuple[FilterField, ...] = fields

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self._fields)

    def normalize(self, values: Mapping[str, Any]) -> tuple[Predicate, ...]:
        """Build predicates for every declared field that carries a value.

        Keys in *values* that the set does not declare are ignored.
        """
        predicates = []
        for field in self._fields:
            value = values.get(field.name)
            if is_unset(value):
                continue
            predicates.append(Predicate(field.target, field.comparator, value))
        return tuple(predicates)
