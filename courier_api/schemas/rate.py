"""Rate calculator request/response schemas."""


from courier_api.schemas.common import CamelModel

class RateCalcRequest(CamelModel):
    """Weight may arrive as a number or a numeric string from the calculator form."""

    weight: float | str | None = None
    destination: str | None = None
    vendor: str | None = None
    service_mode: str | None = None

class RateQuoteResponse(CamelModel):
    success: bool = True
    price: float
    weight: float
    service: str
    vendor: str
    zone: int
