"""Rate calculator router."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from courier_api.db.base import get_db
from courier_api.schemas.rate import RateCalcRequest, RateQuoteResponse
from courier_api.services.rates import RateService

router = APIRouter(prefix="/rates", tags=["Rates"])


@router.post("/calc", response_model=RateQuoteResponse)
async def calculate_rate(body: RateCalcRequest, session: AsyncSession = Depends(get_db)):
    """Cheapest non-document rate for the destination's zones at exactly this weight."""
    quote = await RateService(session).calculate(body)
    return RateQuoteResponse(
        price=float(quote.price),
        weight=quote.weight,
        service=quote.service,
        vendor=quote.vendor,
        zone=quote.zone,
    )
