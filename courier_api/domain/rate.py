"""SQLAlchemy ORM model for carrier price-list rows (one price per zone and weight step)."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import Float, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from courier_api.db.base import Base
from courier_api.domain.mixins import IntPKMixin

DOC_TYPE_DOCUMENT = "Document"
DOC_TYPE_NON_DOCUMENT = "Non Document"


class Rate(Base, IntPKMixin):
    __tablename__ = "rates"

    vendor: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    service: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    zone: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    # "Document" | "Non Document"
    doc_type: Mapped[str] = mapped_column(
        String(20), default=DOC_TYPE_NON_DOCUMENT, nullable=False
    )
    # kg
    weight: Mapped[float] = mapped_column(Float, nullable=False, index=True)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
