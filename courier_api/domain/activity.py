"""SQLAlchemy ORM model for signed-in session heartbeats."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from courier_api.db.base import Base
from courier_api.domain.mixins import IntPKMixin


class UserActivity(Base, IntPKMixin):
    __tablename__ = "user_activity"

    # sha256 of the session token, never the token itself
    token_hash: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    last_activity: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )
