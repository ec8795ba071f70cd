from courier_api.domain.service_mode import ServiceMode
from courier_api.repositories.base import BaseRepository


class ServiceModeRepository(BaseRepository[ServiceMode]):
    model = ServiceMode
    default_order = ("name",)
