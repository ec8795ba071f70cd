"""SQLAlchemy ORM models for the chart of accounts, journal lines, and payments."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from courier_api.db.base import Base
from courier_api.domain.mixins import IntPKMixin, TimestampMixin


class ChartOfAccount(Base, IntPKMixin, TimestampMixin):
    __tablename__ = "chart_of_accounts"

    code: Mapped[str] = mapped_column(String(20), nullable=False, unique=True, index=True)
    account_name: Mapped[str] = mapped_column(String(255), nullable=False)
    # "Asset" | "Liability" | "Equity" | "Expense" | "Revenue"
    category: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(100), nullable=False)
    debit_rule: Mapped[str] = mapped_column(String(50), default="", nullable=False)
    credit_rule: Mapped[str] = mapped_column(String(50), default="", nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    lines: Mapped[List["JournalEntryLine"]] = relationship(
        back_populates="account", lazy="noload"
    )


class JournalEntryLine(Base, IntPKMixin):
    """One debit or credit posting against an account."""

    __tablename__ = "journal_entry_lines"

    account_id: Mapped[int] = mapped_column(
        ForeignKey("chart_of_accounts.id"), nullable=False, index=True
    )
    debit: Mapped[Decimal] = mapped_column(Numeric(14, 2), default=0, nullable=False)
    credit: Mapped[Decimal] = mapped_column(Numeric(14, 2), default=0, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    account: Mapped["ChartOfAccount"] = relationship(back_populates="lines")


class Payment(Base, IntPKMixin, TimestampMixin):
    __tablename__ = "payments"

    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    mode: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    reference: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
