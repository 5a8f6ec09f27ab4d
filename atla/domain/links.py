"""Many-to-many join tables between characters, episodes and quotes."""

from sqlalchemy import Column, ForeignKey, Integer, Table

from atla.db.base import Base

characters_and_episodes = Table(
    "characters_and_episodes",
    Base.metadata,
    Column(
        "character_id",
        Integer,
        ForeignKey("characters.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "episode_id",
        Integer,
        ForeignKey("episodes.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)

characters_and_quotes = Table(
    "characters_and_quotes",
    Base.metadata,
    Column(
        "character_id",
        Integer,
        ForeignKey("characters.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "quote_id",
        Integer,
        ForeignKey("quotes.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)
