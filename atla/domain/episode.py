"""SQLAlchemy ORM model for Episodes."""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from atla.db.base import Base
from atla.domain.mixins import TimestampMixin


class Episode(Base, TimestampMixin):
    __tablename__ = "episodes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    # ISO date string as broadcast, e.g. "2005-02-21"
    air_date: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
