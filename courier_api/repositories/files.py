"""Rate/zone file registry and zone repositories."""

from courier_api.domain.files import FILE_TYPE_ZONE, Filename, Zone
from courier_api.repositories.base import BaseRepository


class FilenameRepository(BaseRepository[Filename]):
    model = Filename
    default_order = ("vendor",)

    async def list_zone_files(self) -> list[Filename]:
        """Zone spreadsheets only, most recent upload first."""
        return await self.list_all(
            filters={"file_type": FILE_TYPE_ZONE},
            order_by=("uploaded_at",),
            order="desc",
        )

    async def find_one(self, **filters) -> Filename | None:
        items = await self.list_all(filters=filters, limit=1)
        return items[0] if items else None


class ZoneRepository(BaseRepository[Zone]):
    model = Zone
    default_order = ("zone", "country")

    async def for_destination(self, destination: str, service: str | None = None) -> list[Zone]:
        """Zones whose country contains *destination* (case-insensitive)."""
        where = [Zone.country.ilike(f"%{destination}%")]
        if service:
            where.append(Zone.service == service)
        q = self._order(self._base_query(), None)
        for clause in where:
            q = q.where(clause)
        return list((await self._session.execute(q)).scalars().all())
