"""Chart of accounts, journal line, and payment repositories."""

from sqlalchemy import or_

from courier_api.domain.accounting import ChartOfAccount, JournalEntryLine, Payment
from courier_api.repositories.base import BaseRepository


class ChartOfAccountRepository(BaseRepository[ChartOfAccount]):
    model = ChartOfAccount
    default_order = ("category", "code")

    async def get_by_code(self, code: str) -> ChartOfAccount | None:
        result = await self._session.execute(
            self._base_query().where(ChartOfAccount.code == code)
        )
        return result.scalars().first()

    async def search(
        self,
        *,
        offset: int,
        limit: int,
        search: str | None = None,
        category: str | None = None,
        account_type: str | None = None,
        is_active: bool | None = None,
    ) -> tuple[list[ChartOfAccount], int]:
        where = []
        if search:
            pattern = f"%{search}%"
            where.append(
                or_(
                    ChartOfAccount.code.ilike(pattern),
                    ChartOfAccount.account_name.ilike(pattern),
                    ChartOfAccount.description.ilike(pattern),
                )
            )
        return await self.list(
            offset=offset,
            limit=limit,
            filters={"category": category, "type": account_type, "is_active": is_active},
            where=where,
        )


class JournalEntryLineRepository(BaseRepository[JournalEntryLine]):
    model = JournalEntryLine


class PaymentRepository(BaseRepository[Payment]):
    model = Payment
    default_order = ("date",)
