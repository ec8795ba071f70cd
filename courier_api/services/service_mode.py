from sqlalchemy.ext.asyncio import AsyncSession

from courier_api.domain.service_mode import ServiceMode
from courier_api.repositories.service_mode import ServiceModeRepository

class ServiceModeService:
    def __init__(self, session: AsyncSession):
        self._repo = ServiceModeRepository(session)

    async def list_service_modes(self) -> list[ServiceMode]:
        return await self._repo.list_all()
