"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  vendor.py        — Carriers whose price lists the portal quotes from
  office.py        — Branch offices (unique code)
  service_mode.py  — Shipping service modes
  accounting.py    — Chart of accounts, journal lines, payments
  files.py         — Rate/zone file registry and parsed zones
  rate.py          — Carrier price lists used by the rate calculator
  activity.py      — Session heartbeats for the "active users" counter
  mixins.py        — Shared IntPKMixin, TimestampMixin
"""

from courier_api.domain.accounting import ChartOfAccount, JournalEntryLine, Payment
from courier_api.domain.activity import UserActivity
from courier_api.domain.files import Filename, Zone
from courier_api.domain.office import Office
from courier_api.domain.rate import Rate
from courier_api.domain.service_mode import ServiceMode
from courier_api.domain.vendor import Vendor

__all__ = [
    "ChartOfAccount",
    "Filename",
    "JournalEntryLine",
    "Office",
    "Payment",
    "Rate",
    "ServiceMode",
    "UserActivity",
    "Vendor",
    "Zone",
]
