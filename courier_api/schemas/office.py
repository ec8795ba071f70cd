"""Office Pydantic schemas (request DTOs and response models)."""


from courier_api.schemas.common import CamelModel, RecordOut

class OfficeWrite(CamelModel):
    """Body of both POST and PUT; presence is checked by the service."""

    code: str | None = None
    name: str | None = None

class OfficeOut(RecordOut):
    code: str
    name: str
