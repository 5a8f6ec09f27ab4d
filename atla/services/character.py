"""Character service — REFERENCE pattern for all services.

How to add a new service:
  1. Create atla/services/my_entity.py
  2. Inject AsyncSession via constructor
  3. Instantiate the repository
  4. Build list directives with build_list_query (safelist + filters)
  5. Raise AppException subclasses for business rule violations

Rule: No FastAPI here. Pure Python business logic.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from atla.core.exceptions import NotFoundError
from atla.core.filters import Comparator, FilterField, FilterSet
from atla.core.pagination import ListParams, Metadata, build_list_query, build_metadata
from atla.core.sorting import SortSafelist
from atla.domain.character import Character
from atla.domain.episode import Episode
from atla.domain.quote import Quote
from atla.repositories.character import CharacterRepository
from atla.repositories.episode import EpisodeRepository
from atla.repositories.quote import QuoteRepository
from atla.schemas.character import CharacterCreate, CharacterUpdate

logger = logging.getLogger(__name__)

CHARACTER_FILTERS = FilterSet(
    FilterField("name", Comparator.IEXACT),
    FilterField("age_from", Comparator.GTE, column="age"),
    FilterField("age_to", Comparator.LTE, column="age"),
)

class CharacterService:
    def __init__(self, session: AsyncSession):
        self._repo = CharacterRepository(session)
        self._episodes = EpisodeRepository(session)
        self._quotes = QuoteRepository(session)

    async def list_characters(
        self,
        params: ListParams,
        *,
        name: str = "",
        age: int = 0,
        age_from: int = 0,
        age_to: int = 0,
    ) -> tuple[list[Character], Metadata]:
        """List characters; ``age`` pins both bounds unless one is given explicitly."""
        safelist = SortSafelist.both_ways("id", "name", "age")
        predicates = CHARACTER_FILTERS.normalize(
            {"name": name, "age_from": age_from or age, "age_to": age_to or age}
        )
        query = build_list_query(params, safelist, predicates)
        items, total = await self._repo.list(query)
        return items, build_metadata(total, query.page, query.page_size)

    async def get_character(self, character_id: int) -> Character:
        character = await self._repo.get_by_id(character_id)
        if not character:
            raise NotFoundError("Character", character_id)
        return character

    async def create_character(self, data: CharacterCreate) -> Character:
        character = await self._repo.create(**data.model_dump())
        logger.info("Created character %d (%s)", character.id, character.name)
        return character

    async def update_character(self, character_id: int, data: CharacterUpdate) -> Character:
        _ = await self.get_character(character_id)  # raises 404 if missing
        updated = await self._repo.update(
            character_id, **data.model_dump(exclude_none=True, exclude_unset=True)
        )
        return updated  # type: ignore[return-value]

    async def delete_character(self, character_id: int) -> None:
        deleted = await self._repo.delete(character_id)
        if not deleted:
            raise NotFoundError("Character", character_id)
        logger.info("Deleted character %d", character_id)

    async def get_character_episodes(self, character_id: int) -> tuple[Character, list[Episode]]:
        character = await self.get_character(character_id)
        return character, await self._episodes.list_by_character(character_id)

    async def get_character_quotes(self, character_id: int) -> tuple[Character, list[Quote]]:
        character = await self.get_character(character_id)
        return character, await self._quotes.list_by_character(character_id)
