from sqlalchemy import insert, select

from atla.domain.links import characters_and_quotes
from atla.domain.quote import Quote
from atla.repositories.base import BaseRepository


class QuoteRepository(BaseRepository[Quote]):
    model = Quote

    async def list_by_character(self, character_id: int) -> list[Quote]:
        result = await self._execute(
            select(Quote)
            .join(characters_and_quotes, Quote.id == characters_and_quotes.c.quote_id)
            .where(characters_and_quotes.c.character_id == character_id)
            .order_by(Quote.id)
        )
        return list(result.scalars().all())

    async def link_character(self, quote_id: int, character_id: int) -> None:
        await self._execute(
            insert(characters_and_quotes).values(character_id=character_id, quote_id=quote_id)
        )
        await self._session.flush()
