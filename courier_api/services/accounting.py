"""Chart of accounts and payment services."""


import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from courier_api.core.exceptions import ConflictError, NotFoundError, ValidationError
from courier_api.core.pagination import PaginationParams
from courier_api.domain.accounting import ChartOfAccount, Payment
from courier_api.repositories.accounting import (
    ChartOfAccountRepository,
    JournalEntryLineRepository,
    PaymentRepository,
)
from courier_api.schemas.accounting import ChartOfAccountCreate, ChartOfAccountUpdate
from courier_api.services._checks import missing
from courier_api.services.chart_defaults import DEFAULT_ACCOUNTS

logger = logging.getLogger(__name__)

SAMPLE_SIZE = 5

_DUPLICATE_MSG = "Account code already exists"

# Columns that keep their current value when an update sends an empty string
_NON_BLANK_COLUMNS = ("account_name", "category", "type")
# NOT NULL columns that keep their current value when an update sends null
_NON_NULL_COLUMNS = ("debit_rule", "credit_rule", "is_active")


@dataclass
class ChartCheck:
    account_count: int
    sample_accounts: list[ChartOfAccount]

    @property
    def message(self) -> str:
        if self.account_count == 0:
            return "No chart of accounts found. Please initialize them first."
        return f"{self.account_count} accounts found."


@dataclass
class PaymentCheck:
    total_count: int
    sample_payments: list[Payment]

    @property
    def message(self) -> str:
        return f"Found {self.total_count} payments in database"


class ChartOfAccountService:
    def __init__(self, session: AsyncSession):
        self._repo = ChartOfAccountRepository(session)
        self._lines = JournalEntryLineRepository(session)

    async def list_accounts(
        self,
        pagination: PaginationParams,
        *,
        search: str | None = None,
        category: str | None = None,
        account_type: str | None = None,
        is_active: bool | None = None,
    ) -> tuple[list[ChartOfAccount], int]:
        return await self._repo.search(
            offset=pagination.offset,
            limit=pagination.limit,
            search=search or None,
            category=category or None,
            account_type=account_type or None,
            is_active=is_active,
        )

    async def get_account(self, account_id: int) -> ChartOfAccount:
        account = await self._repo.get_by_id(account_id)
        if not account:
            raise NotFoundError("Account", account_id)
        return account

    async def create_account(self, data: ChartOfAccountCreate) -> ChartOfAccount:
        if missing(data.code, data.account_name, data.category, data.type):
            raise ValidationError("Code, account name, category, and type are required")
        if await self._repo.get_by_code(data.code.strip()) is not None:
            raise ConflictError(_DUPLICATE_MSG)
        try:
            return await self._repo.create(
                code=data.code.strip(),
                account_name=data.account_name,
                category=data.category,
                type=data.type,
                debit_rule=data.debit_rule or "",
                credit_rule=data.credit_rule or "",
                description=data.description,
                is_active=True,
            )
        except IntegrityError as exc:
            # lost a race with a concurrent insert of the same code
            raise ConflictError(_DUPLICATE_MSG) from exc

    async def update_account(self, account_id: int, data: ChartOfAccountUpdate) -> ChartOfAccount:
        await self.get_account(account_id)  # raises 404 if missing
        changes = data.model_dump(exclude_unset=True)
        for col in _NON_BLANK_COLUMNS:
            if col in changes and not changes[col]:
                del changes[col]
        for col in _NON_NULL_COLUMNS:
            if col in changes and changes[col] is None:
                del changes[col]
        updated = await self._repo.update(account_id, **changes)
        return updated  # type: ignore[return-value]

    async def delete_account(self, account_id: int) -> None:
        await self.get_account(account_id)
        if await self._lines.count({"account_id": account_id}) > 0:
            raise ValidationError("Cannot delete account with existing journal entries")
        await self._repo.delete(account_id)

    async def initialize_defaults(self) -> int:
        if await self._repo.count() > 0:
            raise ValidationError("Chart of accounts already initialized")
        created = await self._repo.create_many(DEFAULT_ACCOUNTS)
        logger.info("Seeded %d default accounts", created)
        return created

    async def check(self) -> ChartCheck:
        count = await self._repo.count()
        sample = await self._repo.list_all(order_by=("code",), limit=SAMPLE_SIZE)
        logger.info("Chart of accounts check: %d accounts", count)
        return ChartCheck(account_count=count, sample_accounts=sample)


class PaymentService:
    def __init__(self, session: AsyncSession):
        self._repo = PaymentRepository(session)

    async def check(self) -> PaymentCheck:
        count = await self._repo.count()
        sample = await self._repo.list_all(order="desc", limit=SAMPLE_SIZE)
        logger.info("Payments check: %d payments", count)
        return PaymentCheck(total_count=count, sample_payments=sample)
