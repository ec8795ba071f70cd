"""Chart of accounts router."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from courier_api.core.pagination import PaginationParams
from courier_api.core.response import DataResponse, MessageResponse, PageResponse, paginated
from courier_api.db.base import get_db
from courier_api.schemas.accounting import (
    ChartCheckResponse,
    ChartInitializeResponse,
    ChartOfAccountCreate,
    ChartOfAccountOut,
    ChartOfAccountUpdate,
)
from courier_api.services.accounting import ChartOfAccountService

router = APIRouter(prefix="/chart-of-accounts", tags=["Chart of Accounts"])


@router.get("", response_model=PageResponse[ChartOfAccountOut])
async def list_accounts(
    search: Optional[str] = Query(default=None, description="Match code, name or description"),
    category: Optional[str] = Query(default=None),
    account_type: Optional[str] = Query(default=None, alias="type"),
    is_active: Optional[bool] = Query(default=None, alias="isActive"),
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """List accounts ordered by category then code (paginated)."""
    items, total = await ChartOfAccountService(session).list_accounts(
        pagination,
        search=search,
        category=category,
        account_type=account_type,
        is_active=is_active,
    )
    return paginated(
        [ChartOfAccountOut.model_validate(a) for a in items],
        total, pagination.page, pagination.limit,
    )


@router.post("", response_model=DataResponse[ChartOfAccountOut])
async def create_account(body: ChartOfAccountCreate, session: AsyncSession = Depends(get_db)):
    account = await ChartOfAccountService(session).create_account(body)
    return {"data": ChartOfAccountOut.model_validate(account)}


@router.post("/initialize", response_model=ChartInitializeResponse)
async def initialize_accounts(session: AsyncSession = Depends(get_db)):
    """Seed the default logistics chart; refused once any account exists."""
    count = await ChartOfAccountService(session).initialize_defaults()
    return ChartInitializeResponse(
        count=count, message=f"Successfully initialized {count} default accounts"
    )


@router.get("/test", response_model=ChartCheckResponse)
async def check_accounts(session: AsyncSession = Depends(get_db)):
    check = await ChartOfAccountService(session).check()
    return ChartCheckResponse(
        account_count=check.account_count,
        sample_accounts=[ChartOfAccountOut.model_validate(a) for a in check.sample_accounts],
        message=check.message,
    )


@router.get("/{account_id}", response_model=DataResponse[ChartOfAccountOut])
async def get_account(account_id: int, session: AsyncSession = Depends(get_db)):
    account = await ChartOfAccountService(session).get_account(account_id)
    return {"data": ChartOfAccountOut.model_validate(account)}


@router.put("/{account_id}", response_model=DataResponse[ChartOfAccountOut])
async def update_account(
    account_id: int,
    body: ChartOfAccountUpdate,
    session: AsyncSession = Depends(get_db),
):
    account = await ChartOfAccountService(session).update_account(account_id, body)
    return {"data": ChartOfAccountOut.model_validate(account)}


@router.delete("/{account_id}", response_model=MessageResponse)
async def delete_account(account_id: int, session: AsyncSession = Depends(get_db)):
    await ChartOfAccountService(session).delete_account(account_id)
    return {"message": "Account deleted successfully"}
