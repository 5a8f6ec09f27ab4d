"""Quote service."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from atla.core.exceptions import NotFoundError
from atla.core.filters import Comparator, FilterField, FilterSet
from atla.core.pagination import ListParams, Metadata, build_list_query, build_metadata
from atla.core.sorting import SortSafelist
from atla.domain.character import Character
from atla.domain.quote import Quote
from atla.repositories.character import CharacterRepository
from atla.repositories.quote import QuoteRepository
from atla.schemas.quote import QuoteCreate, QuoteUpdate

logger = logging.getLogger(__name__)

QUOTE_FILTERS = FilterSet(
    FilterField("quote", Comparator.CONTAINS),
)

class QuoteService:
    def __init__(self, session: AsyncSession):
        self._repo = QuoteRepository(session)
        self._characters = CharacterRepository(session)

    async def list_quotes(self, params: ListParams, *, quote: str = "") -> tuple[list[Quote], Metadata]:
        safelist = SortSafelist.both_ways("id", "quote", "created_at", "updated_at")
        query = build_list_query(params, safelist, QUOTE_FILTERS.normalize({"quote": quote}))
        items, total = await self._repo.list(query)
        return items, build_metadata(total, query.page, query.page_size)

    async def get_quote(self, quote_id: int) -> Quote:
        quote = await self._repo.get_by_id(quote_id)
        if not quote:
            raise NotFoundError("Quote", quote_id)
        return quote

    async def create_quote(self, data: QuoteCreate) -> Quote:
        if data.character_id is not None and not await self._characters.get_by_id(data.character_id):
            raise NotFoundError("Character", data.character_id)
        quote = await self._repo.create(quote=data.quote)
        if data.character_id is not None:
            await self._repo.link_character(quote.id, data.character_id)
        logger.info("Created quote %d", quote.id)
        return quote

    async def update_quote(self, quote_id: int, data: QuoteUpdate) -> Quote:
        _ = await self.get_quote(quote_id)
        updated = await self._repo.update(
            quote_id, **data.model_dump(exclude_none=True, exclude_unset=True)
        )
        return updated  # type: ignore[return-value]

    async def delete_quote(self, quote_id: int) -> None:
        deleted = await self._repo.delete(quote_id)
        if not deleted:
            raise NotFoundError("Quote", quote_id)
        logger.info("Deleted quote %d", quote_id)

    async def get_quote_character(self, quote_id: int) -> tuple[Quote, Character | None]:
        quote = await self.get_quote(quote_id)
        return quote, await self._characters.get_by_quote(quote_id)
