"""SQLAlchemy ORM models for uploaded rate/zone files and parsed zone rows."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from courier_api.db.base import Base
from courier_api.domain.mixins import IntPKMixin

FILE_TYPE_RATE = "rate"
FILE_TYPE_ZONE = "zone"


class Filename(Base, IntPKMixin):
    """Registry of the spreadsheet currently in effect per vendor/service."""

    __tablename__ = "filenames"

    filename: Mapped[str] = mapped_column(String(255), nullable=False)
    vendor: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)
    service: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, index=True)
    # "rate" | "zone"
    file_type: Mapped[str] = mapped_column(
        String(20), default=FILE_TYPE_RATE, nullable=False, index=True
    )
    uploaded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        nullable=False,
        index=True,
    )


class Zone(Base, IntPKMixin):
    """Destination-country to zone mapping for one carrier (``company``)."""

    __tablename__ = "zones"

    code: Mapped[str] = mapped_column(String(20), nullable=False)
    country: Mapped[str] = mapped_column(String(100), nullable=False)
    zone: Mapped[str] = mapped_column(String(20), nullable=False)
    # service mode the zone chart applies to; null when it covers every service
    service: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, index=True)
    # stored lower-cased
    company: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
