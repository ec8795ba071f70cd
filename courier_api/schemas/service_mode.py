from courier_api.schemas.common import CamelModel

class ServiceModeOut(CamelModel):
    id: int
    name: str
