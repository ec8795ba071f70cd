"""Vendor repository."""


from sqlalchemy import select

from courier_api.domain.vendor import Vendor
from courier_api.repositories.base import BaseRepository


class VendorRepository(BaseRepository[Vendor]):
    model = Vendor
    default_order = ("company_name",)

    async def list_names(self) -> list[tuple[int, str]]:
        """Only ``(id, company_name)`` pairs, for the rate-calculator picker."""
        result = await self._session.execute(
            select(Vendor.id, Vendor.company_name).order_by(Vendor.company_name.asc())
        )
        return [(row.id, row.company_name) for row in result.all()]
