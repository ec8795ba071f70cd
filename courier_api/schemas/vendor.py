"""Vendor Pydantic schemas (response models)."""


from courier_api.schemas.common import CamelModel, RecordOut

class VendorName(CamelModel):
    """Entry of GET /rate-vendor."""
    id: int
    company_name: str

class VendorOut(RecordOut):
    company_name: str
    person_name: str | None = None
    email: str | None = None
    phone: str | None = None
    country: str | None = None
    state: str | None = None
    city: str | None = None
    zip: str | None = None
    address: str | None = None
