"""Standardized JSON response envelope helpers.

Every successful body carries ``success: true``; errors are built by
:func:`courier_api.core.exceptions.error_body`.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from courier_api.core.pagination import PageMeta

T = TypeVar("T")

_ENVELOPE_CONFIG = {
    "populate_by_name": True,
    "alias_generator": to_camel,
}


class DataResponse(BaseModel, Generic[T]):
    """Single-item response envelope: `{ success, data: {...} }`"""

    success: bool = True
    data: T

    model_config = _ENVELOPE_CONFIG


class ListResponse(BaseModel, Generic[T]):
    """Unpaginated list envelope: `{ success, data: [...] }`"""

    success: bool = True
    data: list[T]

    model_config = _ENVELOPE_CONFIG


class PageResponse(BaseModel, Generic[T]):
    """Paginated list response envelope: `{ success, data: [...], meta: {...} }`"""

    success: bool = True
    data: list[T]
    meta: PageMeta

    model_config = _ENVELOPE_CONFIG


class MessageResponse(BaseModel):
    """Body-less acknowledgement: `{ success, message }`"""

    success: bool = True
    message: str


def paginated(items: list, total: int, page: int, limit: int) -> dict:
    """Build a paginated response dict for use with PageResponse."""
    return {
        "success": True,
        "data": items,
        "meta": PageMeta.build(total, page, limit),
    }
