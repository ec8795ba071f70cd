"""Vendor read routes: /rate-vendor (id + company name) and /vendors/{id}."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from courier_api.core.response import DataResponse, ListResponse
from courier_api.db.base import get_db
from courier_api.schemas.vendor import VendorName, VendorOut
from courier_api.services.vendor import VendorService

router = APIRouter(tags=["Vendors"])


@router.get("/rate-vendor", response_model=ListResponse[VendorName])
async def list_rate_vendors(session: AsyncSession = Depends(get_db)):
    """Vendor ids and company names for the rate calculator, ordered by name."""
    names = await VendorService(session).list_vendor_names()
    return {"data": [VendorName(id=vid, company_name=name) for vid, name in names]}


@router.get("/vendors/{vendor_id}", response_model=DataResponse[VendorOut])
async def get_vendor(vendor_id: int, session: AsyncSession = Depends(get_db)):
    vendor = await VendorService(session).get_vendor(vendor_id)
    return {"data": VendorOut.model_validate(vendor)}
