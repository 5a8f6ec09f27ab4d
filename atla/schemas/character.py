"""Character Pydantic schemas (request DTOs and response models)."""


from datetime import datetime

from pydantic import Field

from atla.schemas.common import CamelModel

MAX_AGE = 10_000

class CharacterCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    age: int = Field(default=0, ge=0, le=MAX_AGE)
    gender: str = Field(min_length=1, max_length=50)
    status: str = Field(min_length=1, max_length=50)
    nation: str = Field(min_length=1, max_length=100)

class CharacterUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    age: int | None = Field(default=None, ge=0, le=MAX_AGE)
    gender: str | None = Field(default=None, min_length=1, max_length=50)
    status: str | None = Field(default=None, min_length=1, max_length=50)
    nation: str | None = Field(default=None, min_length=1, max_length=100)

class CharacterOut(CamelModel):
    id: int
    name: str
    age: int
    gender: str
    status: str
    nation: str
    created_at: datetime
    updated_at: datetime
