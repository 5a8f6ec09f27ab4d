"""Quote Pydantic schemas (request DTOs and response models)."""


from datetime import datetime

from pydantic import Field

from atla.schemas.common import CamelModel

class QuoteCreate(CamelModel):
    quote: str = Field(min_length=1)
    # Optional speaker; linked through characters_and_quotes
    character_id: int | None = Field(default=None, ge=1)

class QuoteUpdate(CamelModel):
    quote: str | None = Field(default=None, min_length=1)

class QuoteOut(CamelModel):
    id: int
    quote: str
    created_at: datetime
    updated_at: datetime
