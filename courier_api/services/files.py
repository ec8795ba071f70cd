"""Rate/zone file registry and zone lookup services."""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from courier_api.core.exceptions import ValidationError
from courier_api.domain.files import FILE_TYPE_RATE, Filename, Zone
from courier_api.repositories.files import FilenameRepository, ZoneRepository
from courier_api.schemas.files import FilenameWrite
from courier_api.services._checks import missing

logger = logging.getLogger(__name__)

class FileRegistryService:
    def __init__(self, session: AsyncSession):
        self._repo = FilenameRepository(session)

    async def list_zone_files(self) -> list[Filename]:
        files = await self._repo.list_zone_files()
        logger.debug("Available zone files: %s", [f.filename for f in files])
        return files

    async def register_rate_file(self, data: FilenameWrite) -> Filename:
        """Replace the rate file registered for a vendor/service pair."""
        if missing(data.filename, data.vendor, data.service):
            raise ValidationError("Missing filename, vendor, or service")
        removed = await self._repo.delete_where({"vendor": data.vendor, "service": data.service})
        if removed:
            logger.info(
                "Replaced %d rate file(s) for vendor=%s service=%s",
                removed, data.vendor, data.service,
            )
        return await self._repo.create(
            filename=data.filename,
            vendor=data.vendor,
            service=data.service,
            file_type=FILE_TYPE_RATE,
        )

    async def list_rate_files(self) -> list[Filename]:
        return await self._repo.list_all(filters={"file_type": FILE_TYPE_RATE})

    async def find_rate_file(self, vendor: str | None, service: str | None) -> Filename | None:
        if missing(vendor, service):
            raise ValidationError(
                "Both vendor and service are required when querying specific filename"
            )
        return await self._repo.find_one(vendor=vendor, service=service, file_type=FILE_TYPE_RATE)


class ZoneService:
    def __init__(self, session: AsyncSession):
        self._repo = ZoneRepository(session)

    async def list_for_company(self, company: str | None) -> list[Zone]:
        if missing(company):
            raise ValidationError("Company not specified")
        return await self._repo.list_all(filters={"company": company.strip().lower()})
