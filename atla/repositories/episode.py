from sqlalchemy import insert, select

from atla.domain.episode import Episode
from atla.domain.links import characters_and_episodes
from atla.repositories.base import BaseRepository


class EpisodeRepository(BaseRepository[Episode]):
    model = Episode

    async def list_by_character(self, character_id: int) -> list[Episode]:
        result = await self._execute(
            select(Episode)
            .join(characters_and_episodes, Episode.id == characters_and_episodes.c.episode_id)
            .where(characters_and_episodes.c.character_id == character_id)
            .order_by(Episode.id)
        )
        return list(result.scalars().all())

    async def add_character(self, episode_id: int, character_id: int) -> bool:
        """Record that a character appears in an episode.

        Returns False when the appearance was already recorded.
        """
        existing = await self._execute(
            select(characters_and_episodes.c.episode_id)
            .where(characters_and_episodes.c.episode_id == episode_id)
            .where(characters_and_episodes.c.character_id == character_id)
        )
        if existing.first() is not None:
            return False
        await self._execute(
            insert(characters_and_episodes).values(character_id=character_id, episode_id=episode_id)
        )
        await self._session.flush()
        return True
