"""Episode service."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from atla.core.exceptions import NotFoundError
from atla.core.filters import Comparator, FilterField, FilterSet
from atla.core.pagination import ListParams, Metadata, build_list_query, build_metadata
from atla.core.sorting import SortSafelist
from atla.domain.character import Character
from atla.domain.episode import Episode
from atla.repositories.character import CharacterRepository
from atla.repositories.episode import EpisodeRepository
from atla.schemas.episode import EpisodeCreate, EpisodeUpdate

logger = logging.getLogger(__name__)

EPISODE_FILTERS = FilterSet(
    FilterField("title", Comparator.IEXACT),
    FilterField("air_date", Comparator.IEXACT),
)

class EpisodeService:
    def __init__(self, session: AsyncSession):
        self._repo = EpisodeRepository(session)
        self._characters = CharacterRepository(session)

    async def list_episodes(
        self, params: ListParams, *, title: str = "", air_date: str = ""
    ) -> tuple[list[Episode], Metadata]:
        safelist = SortSafelist.both_ways("id", "title", "air_date")
        predicates = EPISODE_FILTERS.normalize({"title": title, "air_date": air_date})
        query = build_list_query(params, safelist, predicates)
        items, total = await self._repo.list(query)
        return items, build_metadata(total, query.page, query.page_size)

    async def get_episode(self, episode_id: int) -> Episode:
        episode = await self._repo.get_by_id(episode_id)
        if not episode:
            raise NotFoundError("Episode", episode_id)
        return episode

    async def create_episode(self, data: EpisodeCreate) -> Episode:
        episode = await self._repo.create(**data.model_dump())
        logger.info("Created episode %d (%s)", episode.id, episode.title)
        return episode

    async def update_episode(self, episode_id: int, data: EpisodeUpdate) -> Episode:
        _ = await self.get_episode(episode_id)
        updated = await self._repo.update(
            episode_id, **data.model_dump(exclude_none=True, exclude_unset=True)
        )
        return updated  # type: ignore[return-value]

    async def delete_episode(self, episode_id: int) -> None:
        deleted = await self._repo.delete(episode_id)
        if not deleted:
            raise NotFoundError("Episode", episode_id)
        logger.info("Deleted episode %d", episode_id)

    async def get_episode_characters(self, episode_id: int) -> tuple[Episode, list[Character]]:
        episode = await self.get_episode(episode_id)
        return episode, await self._characters.list_by_episode(episode_id)

    async def add_character(self, episode_id: int, character_id: int) -> tuple[Episode, list[Character]]:
        """Record an appearance and return the episode with its full cast."""
        _ = await self.get_episode(episode_id)
        if not await self._characters.get_by_id(character_id):
            raise NotFoundError("Character", character_id)
        if await self._repo.add_character(episode_id, character_id):
            logger.info("Character %d now appears in episode %d", character_id, episode_id)
        return await self.get_episode_characters(episode_id)
