"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  character.py  — REFERENCE pattern (copy when adding new entities)
  episode.py    — Episodes
  quote.py      — Quotes
  links.py      — characters_and_episodes / characters_and_quotes join tables
  mixins.py     — Shared TimestampMixin
"""

from atla.domain.character import Character
from atla.domain.episode import Episode
from atla.domain.links import characters_and_episodes, characters_and_quotes
from atla.domain.quote import Quote

__all__ = [
    "Character",
    "Episode",
    "Quote",
    "characters_and_episodes",
    "characters_and_quotes",
]
