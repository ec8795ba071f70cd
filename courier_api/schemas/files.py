"""Rate/zone file registry and zone schemas."""


from datetime import datetime

from courier_api.schemas.common import CamelModel

class FilenameWrite(CamelModel):
    filename: str | None = None
    vendor: str | None = None
    service: str | None = None

class FilenameOut(CamelModel):
    id: int
    filename: str
    vendor: str | None = None
    service: str | None = None
    file_type: str
    uploaded_at: datetime

class ZoneFileOut(CamelModel):
    """Entry of GET /zones/available."""
    id: int
    filename: str
    service: str | None = None
    uploaded_at: datetime

class ZoneOut(CamelModel):
    id: int
    code: str
    country: str
    zone: str
    company: str
    service: str | None = None
