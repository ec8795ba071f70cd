"""SQLAlchemy ORM model for branch offices."""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from courier_api.db.base import Base
from courier_api.domain.mixins import IntPKMixin, TimestampMixin


class Office(Base, IntPKMixin, TimestampMixin):
    __tablename__ = "offices"

    code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
