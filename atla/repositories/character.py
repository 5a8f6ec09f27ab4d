"""Character repository — REFERENCE pattern for all repositories.

How to add a new repository:
  1. Create atla/repositories/my_entity.py
  2. class MyEntityRepository(BaseRepository[MyEntity]):
         model = MyEntity
  3. Add any relation-specific query methods as needed
"""


from sqlalchemy import select

from atla.domain.character import Character
from atla.domain.links import characters_and_episodes, characters_and_quotes
from atla.repositories.base import BaseRepository


class CharacterRepository(BaseRepository[Character]):
    model = Character

    async def list_by_episode(self, episode_id: int) -> list[Character]:
        result = await self._execute(
            select(Character)
            .join(characters_and_episodes, Character.id == characters_and_episodes.c.character_id)
            .where(characters_and_episodes.c.episode_id == episode_id)
            .order_by(Character.id)
        )
        return list(result.scalars().all())

    async def get_by_quote(self, quote_id: int) -> Character | None:
        """The speaker of a quote (lowest id if several are linked)."""
        result = await self._execute(
            select(Character)
            .join(characters_and_quotes, Character.id == characters_and_quotes.c.character_id)
            .where(characters_and_quotes.c.quote_id == quote_id)
            .order_by(Character.id)
            .limit(1)
        )
        return result.scalars().first()
