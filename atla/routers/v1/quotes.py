"""Quote CRUD router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from atla.core.pagination import ListParams
from atla.core.response import DataResponse, ListResponse, paginated
from atla.db.base import get_db
from atla.schemas.character import CharacterOut
from atla.schemas.quote import QuoteCreate, QuoteOut, QuoteUpdate
from atla.schemas.relations import QuoteCharacterOut
from atla.services.quote import QuoteService

router = APIRouter(prefix="/quotes", tags=["Quotes"])


@router.get("", response_model=ListResponse[QuoteOut])
async def list_quotes(
    quote: str = Query(default="", description="Substring of the quote text (case-sensitive)"),
    pagination: ListParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """List quotes (paginated). Sort by id, quote, created_at or updated_at."""
    items, metadata = await QuoteService(session).list_quotes(pagination, quote=quote)
    return paginated([QuoteOut.model_validate(q) for q in items], metadata)


@router.post("", response_model=DataResponse[QuoteOut], status_code=status.HTTP_201_CREATED)
async def create_quote(
    body: QuoteCreate,
    session: AsyncSession = Depends(get_db),
):
    quote = await QuoteService(session).create_quote(body)
    return {"data": QuoteOut.model_validate(quote)}


@router.get("/{quote_id}", response_model=DataResponse[QuoteOut])
async def get_quote(
    quote_id: int,
    session: AsyncSession = Depends(get_db),
):
    quote = await QuoteService(session).get_quote(quote_id)
    return {"data": QuoteOut.model_validate(quote)}


@router.put("/{quote_id}", response_model=DataResponse[QuoteOut])
async def update_quote(
    quote_id: int,
    body: QuoteUpdate,
    session: AsyncSession = Depends(get_db),
):
    quote = await QuoteService(session).update_quote(quote_id, body)
    return {"data": QuoteOut.model_validate(quote)}


@router.delete("/{quote_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_quote(
    quote_id: int,
    session: AsyncSession = Depends(get_db),
):
    await QuoteService(session).delete_quote(quote_id)


@router.get("/{quote_id}/character", response_model=DataResponse[QuoteCharacterOut])
async def get_quote_character(
    quote_id: int,
    session: AsyncSession = Depends(get_db),
):
    """The quote and the character who said it (null when unattributed)."""
    quote, character = await QuoteService(session).get_quote_character(quote_id)
    return {
        "data": QuoteCharacterOut(
            quote=QuoteOut.model_validate(quote),
            character=CharacterOut.model_validate(character) if character else None,
        )
    }
