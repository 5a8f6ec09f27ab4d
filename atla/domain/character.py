"""SQLAlchemy ORM model for Characters.

This is the REFERENCE module showing the pattern for all domain models:
  - Inherit Base, TimestampMixin
  - Integer autoincrement primary key (list endpoints break sort ties on it)
  - created_at / updated_at (from TimestampMixin)
"""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from atla.db.base import Base
from atla.domain.mixins import TimestampMixin


class Character(Base, TimestampMixin):
    __tablename__ = "characters"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    age: Mapped[int] = mapped_column(Integer, default=0, nullable=False, index=True)
    gender: Mapped[str] = mapped_column(String(50), nullable=False)
    # "alive" | "deceased" | "unknown"
    status: Mapped[str] = mapped_column(String(50), nullable=False)
    nation: Mapped[str] = mapped_column(String(100), nullable=False)
