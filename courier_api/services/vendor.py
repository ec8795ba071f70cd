"""Vendor service: the rate-calculator vendor picker and vendor detail.

Vendors are read-only here; they are maintained by the portal's admin screens.
"""


from sqlalchemy.ext.asyncio import AsyncSession

from courier_api.core.exceptions import NotFoundError
from courier_api.domain.vendor import Vendor
from courier_api.repositories.vendor import VendorRepository

class VendorService:
    def __init__(self, session: AsyncSession):
        self._repo = VendorRepository(session)

    async def list_vendor_names(self) -> list[tuple[int, str]]:
        return await self._repo.list_names()

    async def get_vendor(self, vendor_id: int) -> Vendor:
        vendor = await self._repo.get_by_id(vendor_id)
        if not vendor:
            raise NotFoundError("Vendor", vendor_id)
        return vendor
