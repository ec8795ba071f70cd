"""Shared Pydantic bases: camelCase aliases and the columns every stored row exposes."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Request and response bodies speak camelCase; ORM rows validate directly."""

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "from_attributes": True,
    }


class RecordOut(CamelModel):
    """Read model for tables carrying ``TimestampMixin``."""

    id: int
    created_at: datetime
    updated_at: datetime
