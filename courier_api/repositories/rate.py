"""Carrier price-list repository."""

from courier_api.domain.rate import Rate
from courier_api.repositories.base import BaseRepository


class RateRepository(BaseRepository[Rate]):
    model = Rate
    default_order = ("weight", "price")

    async def for_zone(
        self,
        zone: int,
        *,
        doc_type: str,
        weight: float,
        vendor: str | None = None,
        service: str | None = None,
    ) -> list[Rate]:
        """Price rows for one zone and exact weight step; ``None`` filters are skipped."""
        return await self.list_all(
            filters={
                "zone": zone,
                "doc_type": doc_type,
                "weight": weight,
                "vendor": vendor,
                "service": service,
            }
        )
