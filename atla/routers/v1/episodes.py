"""Episode CRUD router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from atla.core.pagination import ListParams
from atla.core.response import DataResponse, ListResponse, paginated
from atla.db.base import get_db
from atla.schemas.character import CharacterOut
from atla.schemas.episode import EpisodeCreate, EpisodeOut, EpisodeUpdate
from atla.schemas.relations import EpisodeCharactersOut
from atla.services.episode import EpisodeService

router = APIRouter(prefix="/episodes", tags=["Episodes"])


def _with_cast(episode, characters) -> dict:
    return {
        "data": EpisodeCharactersOut(
            episode=EpisodeOut.model_validate(episode),
            characters=[CharacterOut.model_validate(c) for c in characters],
        )
    }


@router.get("", response_model=ListResponse[EpisodeOut])
async def list_episodes(
    title: str = Query(default="", description="Exact title, case-insensitive"),
    air_date: str = Query(default="", description="Air date, e.g. 2005-02-21"),
    pagination: ListParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """List episodes (paginated). Sort by id, title or air_date; prefix '-' for descending."""
    items, metadata = await EpisodeService(session).list_episodes(
        pagination, title=title, air_date=air_date,
    )
    return paginated([EpisodeOut.model_validate(e) for e in items], metadata)


@router.post("", response_model=DataResponse[EpisodeOut], status_code=status.HTTP_201_CREATED)
async def create_episode(
    body: EpisodeCreate,
    session: AsyncSession = Depends(get_db),
):
    episode = await EpisodeService(session).create_episode(body)
    return {"data": EpisodeOut.model_validate(episode)}


@router.get("/{episode_id}", response_model=DataResponse[EpisodeOut])
async def get_episode(
    episode_id: int,
    session: AsyncSession = Depends(get_db),
):
    episode = await EpisodeService(session).get_episode(episode_id)
    return {"data": EpisodeOut.model_validate(episode)}


@router.put("/{episode_id}", response_model=DataResponse[EpisodeOut])
async def update_episode(
    episode_id: int,
    body: EpisodeUpdate,
    session: AsyncSession = Depends(get_db),
):
    episode = await EpisodeService(session).update_episode(episode_id, body)
    return {"data": EpisodeOut.model_validate(episode)}


@router.delete("/{episode_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_episode(
    episode_id: int,
    session: AsyncSession = Depends(get_db),
):
    await EpisodeService(session).delete_episode(episode_id)


@router.get("/{episode_id}/characters", response_model=DataResponse[EpisodeCharactersOut])
async def get_episode_characters(
    episode_id: int,
    session: AsyncSession = Depends(get_db),
):
    episode, characters = await EpisodeService(session).get_episode_characters(episode_id)
    return _with_cast(episode, characters)


@router.put(
    "/{episode_id}/characters/{character_id}",
    response_model=DataResponse[EpisodeCharactersOut],
)
async def add_episode_character(
    episode_id: int,
    character_id: int,
    session: AsyncSession = Depends(get_db),
):
    """Record that a character appears in the episode. Safe to repeat."""
    episode, characters = await EpisodeService(session).add_character(episode_id, character_id)
    return _with_cast(episode, characters)
