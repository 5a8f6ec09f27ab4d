"""Response models for endpoints that walk the join tables."""


from atla.schemas.character import CharacterOut
from atla.schemas.common import CamelModel
from atla.schemas.episode import EpisodeOut
from atla.schemas.quote import QuoteOut

class CharacterEpisodesOut(CamelModel):
    character: CharacterOut
    episodes: list[EpisodeOut]

class CharacterQuotesOut(CamelModel):
    character: CharacterOut
    quotes: list[QuoteOut]

class EpisodeCharactersOut(CamelModel):
    episode: EpisodeOut
    characters: list[CharacterOut]

class QuoteCharacterOut(CamelModel):
    quote: QuoteOut
    character: CharacterOut | None = None
