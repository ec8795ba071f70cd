from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from courier_api.core.response import ListResponse
from courier_api.db.base import get_db
from courier_api.schemas.service_mode import ServiceModeOut
from courier_api.services.service_mode import ServiceModeService

router = APIRouter(prefix="/services", tags=["Services"])


@router.get("", response_model=ListResponse[ServiceModeOut])
async def list_service_modes(session: AsyncSession = Depends(get_db)):
    modes = await ServiceModeService(session).list_service_modes()
    return {"data": [ServiceModeOut.model_validate(m) for m in modes]}
