"""Pagination helpers for list endpoints."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from fastapi import Query
from pydantic import BaseModel, model_serializer

from atla.core.exceptions import FailedValidationError
from atla.core.filters import Predicate
from atla.core.sorting import SortDirective, SortSafelist

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
DEFAULT_SORT = "id"
MAX_PAGE = 10_000_000
MAX_PAGE_SIZE = 100


class ListParams:
    """FastAPI dependency for `?page=1&page_size=20&sort=-name`.

    Bounds are deliberately not enforced by ``Query`` so that every problem is
    reported through :func:`validate_list_params` in one field-error map.
    """

    def __init__(
        self,
        page: int = Query(default=DEFAULT_PAGE, description="Page number (1-based)"),
        page_size: int = Query(default=DEFAULT_PAGE_SIZE, description="Items per page (max 100)"),
        sort: str = Query(default=DEFAULT_SORT, description="Sort token; prefix with '-' for descending"),
    ):
        self.page = page
        self.page_size = page_size
        self.sort = sort

    def __repr__(self) -> str:
        return f"ListParams(page={self.page}, page_size={self.page_size}, sort={self.sort!r})"


@dataclass(frozen=True)
class ListQuery:
    """A validated list directive handed to a repository."""

    page: int
    page_size: int
    sort: SortDirective
    predicates: tuple[Predicate, ...] = ()

    @property
    def limit(self) -> int:
        return self.page_size

    @property
    def offset(self) -> int:
        return self.page_size * (self.page - 1)


def validate_list_params(params: ListParams, safelist: SortSafelist) -> dict[str, str]:
    """Return a field -> message map; empty when the params are acceptable."""
    errors: dict[str, str] = {}

    if params.page < 1:
        errors["page"] = "must be greater than zero"
    elif params.page > MAX_PAGE:
        errors["page"] = "must be a maximum of 10 million"

    if params.page_size < 1:
        errors["page_size"] = "must be greater than zero"
    elif params.page_size > MAX_PAGE_SIZE:
        errors["page_size"] = f"must be a maximum of {MAX_PAGE_SIZE}"

    if params.sort not in safelist:
        errors["sort"] = "invalid sort value"

    return errors


def build_list_query(
    params: ListParams,
    safelist: SortSafelist,
    predicates: Iterable[Predicate] = (),
) -> ListQuery:
    """Validate *params* against *safelist* and combine them with *predicates*.

    Raises :class:`FailedValidationError` before anything touches the database.
    """
    errors = validate_list_params(params, safelist)
    if errors:
        raise FailedValidationError(errors)
    return ListQuery(
        page=params.page,
        page_size=params.page_size,
        sort=safelist.resolve(params.sort),
        predicates=tuple(predicates),
    )


class Metadata(BaseModel):
    """Pagination summary returned next to a page of results.

    The zero value (no matching records) serializes as an empty object.
    """

    current_page: int = 0
    page_size: int = 0
    first_page: int = 0
    last_page: int = 0
    total_records: int = 0

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        return self.total_records == 0

    @model_serializer(mode="wrap")
    def _omit_when_empty(self, handler) -> dict[str, int]:
        if self.is_empty:
            return {}
        return handler(self)


def build_metadata(total_records: int, page: int, page_size: int) -> Metadata:
    if total_records == 0:
        return Metadata()
    return Metadata(
        current_page=page,
        page_size=page_size,
        first_page=1,
        last_page=math.ceil(total_records / page_size),
        total_records=total_records,
    )
