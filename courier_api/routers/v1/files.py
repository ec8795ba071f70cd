"""Rate/zone file registry and zone routers."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from courier_api.core.response import DataResponse, ListResponse
from courier_api.db.base import get_db
from courier_api.schemas.files import FilenameOut, FilenameWrite, ZoneFileOut, ZoneOut
from courier_api.services.files import FileRegistryService, ZoneService

router = APIRouter(tags=["Files"])


@router.get("/zones/available", response_model=ListResponse[ZoneFileOut])
async def list_available_zones(session: AsyncSession = Depends(get_db)):
    """Uploaded zone files, newest first."""
    files = await FileRegistryService(session).list_zone_files()
    return {"data": [ZoneFileOut.model_validate(f) for f in files]}


@router.get("/zones", response_model=ListResponse[ZoneOut])
async def list_zones(
    company: Optional[str] = Query(default=None, description="Carrier name (case-insensitive)"),
    session: AsyncSession = Depends(get_db),
):
    zones = await ZoneService(session).list_for_company(company)
    return {"data": [ZoneOut.model_validate(z) for z in zones]}


@router.post("/filenames", response_model=DataResponse[FilenameOut])
async def register_rate_file(body: FilenameWrite, session: AsyncSession = Depends(get_db)):
    record = await FileRegistryService(session).register_rate_file(body)
    return {"data": FilenameOut.model_validate(record)}


@router.get("/filenames", response_model=None)
async def get_rate_files(
    vendor: Optional[str] = Query(default=None),
    service: Optional[str] = Query(default=None),
    session: AsyncSession = Depends(get_db),
):
    """All rate files, or the one registered for ``vendor`` + ``service``."""
    svc = FileRegistryService(session)
    if vendor is None and service is None:
        files = await svc.list_rate_files()
        return ListResponse[FilenameOut](data=[FilenameOut.model_validate(f) for f in files])
    record = await svc.find_rate_file(vendor, service)
    return DataResponse[Optional[FilenameOut]](
        data=FilenameOut.model_validate(record) if record else None
    )
