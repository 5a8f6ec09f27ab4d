"""Character CRUD router — REFERENCE pattern for all v1 routers.

Pattern:
  1. Declare a router with prefix and tags
  2. Inject DB session via Depends
  3. Instantiate the service with the session
  4. Call service methods and wrap result in response envelope
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from atla.core.pagination import ListParams
from atla.core.response import DataResponse, ListResponse, paginated
from atla.db.base import get_db
from atla.schemas.character import CharacterCreate, CharacterOut, CharacterUpdate
from atla.schemas.episode import EpisodeOut
from atla.schemas.quote import QuoteOut
from atla.schemas.relations import CharacterEpisodesOut, CharacterQuotesOut
from atla.services.character import CharacterService

router = APIRouter(prefix="/characters", tags=["Characters"])


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=ListResponse[CharacterOut])
async def list_characters(
    name: str = Query(default="", description="Exact name, case-insensitive"),
    age: int = Query(default=0, description="Exact age (0 = any)"),
    age_from: int = Query(default=0, description="Minimum age (0 = unbounded)"),
    age_to: int = Query(default=0, description="Maximum age (0 = unbounded)"),
    pagination: ListParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """List characters (paginated). Sort by id, name or age; prefix '-' for descending."""
    items, metadata = await CharacterService(session).list_characters(
        pagination, name=name, age=age, age_from=age_from, age_to=age_to,
    )
    return paginated([CharacterOut.model_validate(c) for c in items], metadata)


@router.post("", response_model=DataResponse[CharacterOut], status_code=status.HTTP_201_CREATED)
async def create_character(
    body: CharacterCreate,
    session: AsyncSession = Depends(get_db),
):
    character = await CharacterService(session).create_character(body)
    return {"data": CharacterOut.model_validate(character)}


@router.get("/{character_id}", response_model=DataResponse[CharacterOut])
async def get_character(
    character_id: int,
    session: AsyncSession = Depends(get_db),
):
    character = await CharacterService(session).get_character(character_id)
    return {"data": CharacterOut.model_validate(character)}


@router.put("/{character_id}", response_model=DataResponse[CharacterOut])
async def update_character(
    character_id: int,
    body: CharacterUpdate,
    session: AsyncSession = Depends(get_db),
):
    character = await CharacterService(session).update_character(character_id, body)
    return {"data": CharacterOut.model_validate(character)}


@router.delete("/{character_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_character(
    character_id: int,
    session: AsyncSession = Depends(get_db),
):
    await CharacterService(session).delete_character(character_id)


@router.get("/{character_id}/episodes", response_model=DataResponse[CharacterEpisodesOut])
async def get_character_episodes(
    character_id: int,
    session: AsyncSession = Depends(get_db),
):
    """The character and every episode they appear in."""
    character, episodes = await CharacterService(session).get_character_episodes(character_id)
    return {
        "data": CharacterEpisodesOut(
            character=CharacterOut.model_validate(character),
            episodes=[EpisodeOut.model_validate(e) for e in episodes],
        )
    }


@router.get("/{character_id}/quotes", response_model=DataResponse[CharacterQuotesOut])
async def get_character_quotes(
    character_id: int,
    session: AsyncSession = Depends(get_db),
):
    """The character and everything they said."""
    character, quotes = await CharacterService(session).get_character_quotes(character_id)
    return {
        "data": CharacterQuotesOut(
            character=CharacterOut.model_validate(character),
            quotes=[QuoteOut.model_validate(q) for q in quotes],
        )
    }
