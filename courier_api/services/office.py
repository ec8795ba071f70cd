"""Office service: branch office codes must stay unique."""


import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from courier_api.core.exceptions import ConflictError, NotFoundError, ValidationError
from courier_api.domain.office import Office
from courier_api.repositories.office import OfficeRepository
from courier_api.schemas.office import OfficeWrite
from courier_api.services._checks import missing

logger = logging.getLogger(__name__)

_REQUIRED_MSG = "Code and name are required"
_DUPLICATE_MSG = "Office code already exists"

class OfficeService:
    def __init__(self, session: AsyncSession):
        self._repo = OfficeRepository(session)

    async def list_offices(self) -> list[Office]:
        return await self._repo.list_all()

    async def create_office(self, data: OfficeWrite) -> Office:
        if missing(data.code, data.name):
            raise ValidationError(_REQUIRED_MSG)
        try:
            return await self._repo.create(code=data.code.strip(), name=data.name.strip())
        except IntegrityError as exc:
            logger.info("Rejected duplicate office code %r", data.code)
            raise ConflictError(_DUPLICATE_MSG) from exc

    async def update_office(self, office_id: int, data: OfficeWrite) -> Office:
        if missing(data.code, data.name):
            raise ValidationError(_REQUIRED_MSG)
        if await self._repo.get_by_id(office_id) is None:
            raise NotFoundError("Office", office_id)
        try:
            updated = await self._repo.update(
                office_id, code=data.code.strip(), name=data.name.strip()
            )
        except IntegrityError as exc:
            raise ConflictError(_DUPLICATE_MSG) from exc
        return updated  # type: ignore[return-value]

    async def delete_office(self, office_id: int) -> None:
        deleted = await self._repo.delete(office_id)
        if not deleted:
            raise NotFoundError("Office", office_id)
