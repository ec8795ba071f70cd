"""Office CRUD router."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from courier_api.core.response import DataResponse, ListResponse, MessageResponse
from courier_api.db.base import get_db
from courier_api.schemas.office import OfficeOut, OfficeWrite
from courier_api.services.office import OfficeService

router = APIRouter(prefix="/offices", tags=["Offices"])


@router.get("", response_model=ListResponse[OfficeOut])
async def list_offices(session: AsyncSession = Depends(get_db)):
    """All offices ordered by code."""
    offices = await OfficeService(session).list_offices()
    return {"data": [OfficeOut.model_validate(o) for o in offices]}


@router.post("", response_model=DataResponse[OfficeOut])
async def create_office(body: OfficeWrite, session: AsyncSession = Depends(get_db)):
    office = await OfficeService(session).create_office(body)
    return {"data": OfficeOut.model_validate(office)}


@router.put("/{office_id}", response_model=DataResponse[OfficeOut])
async def update_office(
    office_id: int,
    body: OfficeWrite,
    session: AsyncSession = Depends(get_db),
):
    office = await OfficeService(session).update_office(office_id, body)
    return {"data": OfficeOut.model_validate(office)}


@router.delete("/{office_id}", response_model=MessageResponse)
async def delete_office(office_id: int, session: AsyncSession = Depends(get_db)):
    await OfficeService(session).delete_office(office_id)
    return {"message": "Office deleted successfully"}
