"""Initial schema: characters, episodes, quotes and their join tables.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "characters",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("age", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("gender", sa.String(50), nullable=False),
        sa.Column("status", sa.String(50), nullable=False),
        sa.Column("nation", sa.String(100), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_characters_name", "characters", ["name"])
    op.create_index("ix_characters_age", "characters", ["age"])

    op.create_table(
        "episodes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("air_date", sa.String(20), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_episodes_title", "episodes", ["title"])
    op.create_index("ix_episodes_air_date", "episodes", ["air_date"])

    op.create_table(
        "quotes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("quote", sa.Text(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "characters_and_episodes",
        sa.Column("character_id", sa.Integer(), sa.ForeignKey("characters.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("episode_id", sa.Integer(), sa.ForeignKey("episodes.id", ondelete="CASCADE"), primary_key=True),
    )
    op.create_index("ix_characters_and_episodes_episode_id", "characters_and_episodes", ["episode_id"])

    op.create_table(
        "characters_and_quotes",
        sa.Column("character_id", sa.Integer(), sa.ForeignKey("characters.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("quote_id", sa.Integer(), sa.ForeignKey("quotes.id", ondelete="CASCADE"), primary_key=True),
    )
    op.create_index("ix_characters_and_quotes_quote_id", "characters_and_quotes", ["quote_id"])


def downgrade() -> None:
    op.drop_table("characters_and_quotes")
    op.drop_table("characters_and_episodes")
    op.drop_table("quotes")
    op.drop_table("episodes")
    op.drop_table("characters")
