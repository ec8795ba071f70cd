"""SQLAlchemy ORM model for Vendors (carriers whose rate lists the portal uses).

Vendor rows are matched to `rates.vendor` and `filenames.vendor` by company name.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from courier_api.db.base import Base
from courier_api.domain.mixins import IntPKMixin, TimestampMixin


class Vendor(Base, IntPKMixin, TimestampMixin):
    __tablename__ = "vendors"

    company_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    person_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), index=True, nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    country: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    state: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    zip: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
