from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import RedirectResponse

from courier_api.core.config import settings

router = APIRouter(prefix="/accounts/invoices", tags=["Invoices"])


@router.get("/{invoice_id}/receipt", response_class=RedirectResponse)
async def invoice_receipt(invoice_id: int):
    """Receipts are rendered by the front-end; send the browser there."""
    target = f"{settings.receipt_page_path.rstrip('/')}/{invoice_id}"
    return RedirectResponse(url=target, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
