from courier_api.domain.office import Office
from courier_api.repositories.base import BaseRepository


class OfficeRepository(BaseRepository[Office]):
    model = Office
    default_order = ("code",)
