"""Database connectivity check behind GET /test-db."""


import logging

from sqlalchemy import func, inspect, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from courier_api.core.exceptions import DatabaseError
from courier_api.db.base import Base

logger = logging.getLogger(__name__)


def _inspect_tables(sync_session) -> tuple[str, list[str]]:
    conn = sync_session.connection()
    return conn.dialect.name, inspect(conn).get_table_names()


class DiagnosticsService:
    def __init__(self, session: AsyncSession):
        self._session = session

    async def check_connection(self) -> str:
        """Run ``SELECT 1``; return the dialect name."""
        try:
            await self._session.execute(text("SELECT 1"))
            dialect, _ = await self._session.run_sync(_inspect_tables)
        except SQLAlchemyError as exc:
            logger.error("Database connection failed: %s", exc)
            raise DatabaseError("Database connection failed") from exc
        return dialect

    async def table_counts(self) -> list[tuple[str, int | None]]:
        """Row counts for every mapped table; ``None`` for tables not yet migrated."""
        _, present = await self._session.run_sync(_inspect_tables)
        counts: list[tuple[str, int | None]] = []
        for table in Base.metadata.sorted_tables:
            if table.name not in present:
                counts.append((table.name, None))
                continue
            total = (
                await self._session.execute(select(func.count()).select_from(table))
            ).scalar_one()
            counts.append((table.name, total))
        logger.info("Table check: %s", dict(counts))
        return counts
