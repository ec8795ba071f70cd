"""Session heartbeat service behind the dashboard's "active users" counter."""


import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from courier_api.core.config import settings
from courier_api.core.exceptions import ValidationError
from courier_api.core.security import decode_token, hash_token, user_id_from_payload
from courier_api.repositories.activity import UserActivityRepository
from courier_api.services._checks import missing

logger = logging.getLogger(__name__)

class UserActivityService:
    def __init__(self, session: AsyncSession, window_minutes: int | None = None):
        self._repo = UserActivityRepository(session)
        self._window = timedelta(minutes=window_minutes or settings.activity_window_minutes)

    def _cutoff(self, now: datetime) -> datetime:
        return now - self._window

    async def heartbeat(self, token: str | None) -> int:
        """Record activity for *token* and return the number of live sessions."""
        if missing(token):
            raise ValidationError("Token required")
        user_id = user_id_from_payload(decode_token(token))

        now = datetime.now(timezone.utc)
        await self._repo.touch(hash_token(token), user_id, now)
        purged = await self._repo.purge_older_than(self._cutoff(now))
        sessions = await self._repo.count()
        logger.debug("Heartbeat user=%s purged=%d sessions=%d", user_id, purged, sessions)
        return sessions

    async def summary(self) -> tuple[int, int]:
        """Return ``(distinct active users, live sessions)``."""
        await self._repo.purge_older_than(self._cutoff(datetime.now(timezone.utc)))
        return await self._repo.distinct_users(), await self._repo.count()
