"""Rate calculator: cheapest price list row for a destination and weight."""


import logging
import math
import re
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from courier_api.core.exceptions import NoMatchError, ValidationError
from courier_api.domain.files import Zone
from courier_api.domain.rate import DOC_TYPE_NON_DOCUMENT, Rate
from courier_api.repositories.files import ZoneRepository
from courier_api.repositories.rate import RateRepository
from courier_api.schemas.rate import RateCalcRequest
from courier_api.services._checks import missing

logger = logging.getLogger(__name__)

_ZONE_NUMBER = re.compile(r"\d+")


@dataclass
class RateQuote:
    price: Decimal
    weight: float
    service: str
    vendor: str
    zone: int

    @classmethod
    def from_rate(cls, rate: Rate) -> "RateQuote":
        return cls(
            price=rate.price,
            weight=rate.weight,
            service=rate.service,
            vendor=rate.vendor,
            zone=rate.zone,
        )


def parse_weight(raw: float | str | None) -> float:
    """Positive finite kilograms, or :class:`ValidationError`."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise ValidationError("Weight is required.")
    try:
        weight = float(raw)
    except ValueError as exc:
        raise ValidationError("Weight must be a valid positive number.") from exc
    if not math.isfinite(weight) or weight <= 0:
        raise ValidationError("Weight must be a valid positive number.")
    return weight


def zone_numbers(zones: list[Zone]) -> list[int]:
    """Distinct zone numbers in first-seen order; labels like "Zone 3" yield 3."""
    numbers: list[int] = []
    for z in zones:
        match = _ZONE_NUMBER.search(z.zone or "")
        if match is None:
            logger.warning("Zone %r for %s has no number; skipped", z.zone, z.country)
            continue
        number = int(match.group())
        if number not in numbers:
            numbers.append(number)
    return numbers


class RateService:
    def __init__(self, session: AsyncSession):
        self._zones = ZoneRepository(session)
        self._rates = RateRepository(session)

    async def calculate(self, data: RateCalcRequest) -> RateQuote:
        weight = parse_weight(data.weight)
        if missing(data.destination):
            raise ValidationError("Destination is required.")
        destination = data.destination.strip()
        vendor = data.vendor.strip() if not missing(data.vendor) else None
        service = data.service_mode.strip() if not missing(data.service_mode) else None

        zones = await self._zones.for_destination(destination, service)
        if not zones:
            raise NoMatchError(
                f"No zones found for destination: {destination}. "
                "Please check the destination country name."
            )

        candidates: list[Rate] = []
        for number in zone_numbers(zones):
            rates = await self._rates.for_zone(
                number,
                doc_type=DOC_TYPE_NON_DOCUMENT,
                weight=weight,
                vendor=vendor,
                service=service,
            )
            logger.debug("Zone %d: %d rate(s) at %skg", number, len(rates), weight)
            candidates.extend(rates)

        if not candidates:
            message = f"No rates found for destination: {destination} and weight: {weight:g}kg"
            if vendor:
                message += f", vendor: {vendor}"
            if service:
                message += f", service: {service}"
            raise NoMatchError(message)

        # min() keeps the first of equally priced rows
        best = min(candidates, key=lambda r: r.price)
        logger.info(
            "Quoted %s %s zone %d %skg -> %s",
            best.vendor, best.service, best.zone, best.weight, best.price,
        )
        return RateQuote.from_rate(best)
