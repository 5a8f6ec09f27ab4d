"""Sort safelists and sort-token resolution for list endpoints.

A list endpoint declares the sort tokens it accepts, e.g.::

    SortSafelist("id", "name", "-id", "-name")

A leading ``-`` marks the descending variant, and each direction is a
separate entry. Column names handed to the query layer always come from these
declared literals, never from the caller's token, because the column ends up
in the ORDER BY clause rather than in a bound parameter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

DESCENDING_PREFIX = "-"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortDirective:
    """A resolved ORDER BY target: one column and one direction."""

    column: str
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC


class SortSafelist:
    """Immutable, ordered set of sort tokens a list endpoint accepts.

    Membership is case-sensitive and exact: ``"name"`` does not admit
    ``"Name"``, and ``"-name"`` must be declared to allow a descending sort.
    """

    __slots__ = ("_tokens", "_directives")

    def __init__(self, *tokens: str):
        self._tokens: tuple[str, ...] = tuple(dict.fromkeys(tokens))
        self._directives: dict[str, SortDirective] = {
            token: _directive_for(token) for token in self._tokens
        }

    @classmethod
    def both_ways(cls, *columns: str) -> SortSafelist:
        """Safelist with every column ascending, then every column descending."""
        return cls(*columns, *(DESCENDING_PREFIX + c for c in columns))

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and token in self._directives

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"SortSafelist{self._tokens!r}"

    def resolve(self, token: str) -> SortDirective:
        """Return the directive declared for *token*.

        Raises ``KeyError`` for tokens outside the safelist; callers validate
        membership first.
        """
        return self._directives[token]


def _directive_for(token: str) -> SortDirective:
    if token.startswith(DESCENDING_PREFIX):
        column = token[len(DESCENDING_PREFIX):]
        direction = SortDirection.DESC
    else:
        column = token
        direction = SortDirection.ASC
    if not column.isidentifier():
        raise ValueError(f"sort token {token!r} does not name a column")
    return SortDirective(column=column, direction=direction)
