"""Chart of accounts and payment schemas."""


from datetime import datetime
from decimal import Decimal

from courier_api.schemas.common import CamelModel, RecordOut

class ChartOfAccountCreate(CamelModel):
    code: str | None = None
    account_name: str | None = None
    category: str | None = None
    type: str | None = None
    debit_rule: str | None = None
    credit_rule: str | None = None
    description: str | None = None

class ChartOfAccountUpdate(CamelModel):
    account_name: str | None = None
    category: str | None = None
    type: str | None = None
    debit_rule: str | None = None
    credit_rule: str | None = None
    description: str | None = None
    is_active: bool | None = None

class ChartOfAccountOut(RecordOut):
    code: str
    account_name: str
    category: str
    type: str
    debit_rule: str
    credit_rule: str
    description: str | None = None
    is_active: bool

class ChartInitializeResponse(CamelModel):
    success: bool = True
    count: int
    message: str

class ChartCheckResponse(CamelModel):
    """Diagnostic payload of GET /chart-of-accounts/test."""
    success: bool = True
    account_count: int
    sample_accounts: list[ChartOfAccountOut]
    message: str

class PaymentOut(CamelModel):
    id: int
    date: datetime
    amount: Decimal
    mode: str | None = None
    reference: str | None = None
    description: str | None = None

class PaymentCheckResponse(CamelModel):
    """Diagnostic payload of GET /test-payments."""
    success: bool = True
    total_count: int
    sample_payments: list[PaymentOut]
    message: str
