"""v1 router package — all /api/v1/* endpoints live here.

Files:
  vendors.py            — /rate-vendor picker and /vendors/{id} detail
  offices.py            — /offices CRUD
  services.py           — /services (service modes)
  chart_of_accounts.py  — /chart-of-accounts CRUD, seeding and check
  files.py              — /zones/available, /zones, /filenames
  invoices.py           — /accounts/invoices/{id}/receipt redirect
  rates.py              — /rates/calc rate calculator
  user_activity.py      — /user-activity heartbeats
  diagnostics.py        — /test-db, /test-payments

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to courier_api/services/.
"""

from fastapi import APIRouter

from courier_api.routers.v1.chart_of_accounts import router as chart_of_accounts_router
from courier_api.routers.v1.diagnostics import router as diagnostics_router
from courier_api.routers.v1.files import router as files_router
from courier_api.routers.v1.invoices import router as invoices_router
from courier_api.routers.v1.offices import router as offices_router
from courier_api.routers.v1.rates import router as rates_router
from courier_api.routers.v1.services import router as services_router
from courier_api.routers.v1.user_activity import router as user_activity_router
from courier_api.routers.v1.vendors import router as vendors_router

api_router = APIRouter()
for _router in (
    offices_router,
    vendors_router,
    services_router,
    chart_of_accounts_router,
    files_router,
    rates_router,
    invoices_router,
    user_activity_router,
    diagnostics_router,
):
    api_router.include_router(_router)
