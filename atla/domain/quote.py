"""SQLAlchemy ORM model for Quotes."""

from __future__ import annotations

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from atla.db.base import Base
from atla.domain.mixins import TimestampMixin


class Quote(Base, TimestampMixin):
    __tablename__ = "quotes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    quote: Mapped[str] = mapped_column(Text, nullable=False)
