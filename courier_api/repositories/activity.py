"""Session heartbeat repository."""

from datetime import datetime

from sqlalchemy import delete, distinct, func, select

from courier_api.domain.activity import UserActivity
from courier_api.repositories.base import BaseRepository


class UserActivityRepository(BaseRepository[UserActivity]):
    model = UserActivity

    async def touch(self, token_hash: str, user_id: int, when: datetime) -> UserActivity:
        """Insert or refresh the heartbeat for one session."""
        result = await self._session.execute(
            self._base_query().where(UserActivity.token_hash == token_hash)
        )
        row = result.scalars().first()
        if row is None:
            return await self.create(token_hash=token_hash, user_id=user_id, last_activity=when)
        row.user_id = user_id
        row.last_activity = when
        await self._session.flush()
        return row

    async def purge_older_than(self, cutoff: datetime) -> int:
        result = await self._session.execute(
            delete(UserActivity).where(UserActivity.last_activity < cutoff)
        )
        await self._session.flush()
        return result.rowcount

    async def distinct_users(self) -> int:
        result = await self._session.execute(
            select(func.count(distinct(UserActivity.user_id)))
        )
        return result.scalar_one()
