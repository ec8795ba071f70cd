"""SQLAlchemy ORM model for shipping service modes (Express, Economy, ...)."""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from courier_api.db.base import Base
from courier_api.domain.mixins import IntPKMixin


class ServiceMode(Base, IntPKMixin):
    __tablename__ = "service_modes"

    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
