"""Add carrier price lists and per-service zone charts

Revision ID: 002
Revises: 001
Create Date: 2026-10-20 00:00:00.000000+00:00
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    with op.batch_alter_table("zones") as batch:
        batch.add_column(sa.Column("service", sa.String(100), nullable=True))
        batch.create_index("ix_zones_service", ["service"])

    op.create_table(
        "rates",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("vendor", sa.String(255), nullable=False),
        sa.Column("service", sa.String(100), nullable=False),
        sa.Column("zone", sa.Integer(), nullable=False),
        sa.Column("doc_type", sa.String(20), nullable=False, server_default="Non Document"),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
    )
    for column in ("vendor", "service", "zone", "weight"):
        op.create_index(f"ix_rates_{column}", "rates", [column])


def downgrade() -> None:
    op.drop_table("rates")
    with op.batch_alter_table("zones") as batch:
        batch.drop_index("ix_zones_service")
        batch.drop_column("service")
