"""Standardized JSON response envelope helpers."""


from typing import Generic, TypeVar

from pydantic import BaseModel

from atla.core.pagination import Metadata

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Single-item response envelope: `{ data: {...} }`"""

    data: T


class ListResponse(BaseModel, Generic[T]):
    """Paginated list response envelope: `{ data: [...], metadata: {...} }`

    ``metadata`` is `{}` when nothing matched.
    """

    data: list[T]
    metadata: Metadata


def paginated(items: list, metadata: Metadata) -> dict:
    """Build a paginated response dict for use with ListResponse."""
    return {"data": items, "metadata": metadata}
