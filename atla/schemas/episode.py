"""Episode Pydantic schemas (request DTOs and response models)."""


from datetime import datetime

from pydantic import Field

from atla.schemas.common import CamelModel

class EpisodeCreate(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    air_date: str = Field(min_length=1, max_length=20)

class EpisodeUpdate(CamelModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    air_date: str | None = Field(default=None, min_length=1, max_length=20)

class EpisodeOut(CamelModel):
    id: int
    title: str
    air_date: str
    created_at: datetime
    updated_at: datetime
