"""Diagnostic endpoints used while provisioning a new database."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from courier_api.db.base import get_db
from courier_api.schemas.accounting import PaymentCheckResponse, PaymentOut
from courier_api.schemas.diagnostics import ConnectionInfo, DatabaseCheckResponse, TableInfo
from courier_api.services.accounting import PaymentService
from courier_api.services.diagnostics import DiagnosticsService

router = APIRouter(tags=["Diagnostics"])


@router.get("/test-db", response_model=DatabaseCheckResponse)
async def check_database(session: AsyncSession = Depends(get_db)):
    svc = DiagnosticsService(session)
    dialect = await svc.check_connection()
    tables = await svc.table_counts()
    return DatabaseCheckResponse(
        connection=ConnectionInfo(dialect=dialect),
        tables=[TableInfo(name=name, row_count=rows) for name, rows in tables],
        message="Database connection and table check completed",
    )


@router.get("/test-payments", response_model=PaymentCheckResponse)
async def check_payments(session: AsyncSession = Depends(get_db)):
    check = await PaymentService(session).check()
    return PaymentCheckResponse(
        total_count=check.total_count,
        sample_payments=[PaymentOut.model_validate(p) for p in check.sample_payments],
        message=check.message,
    )
