"""Services package — all business logic lives here, never in routers.

Files:
  vendor.py          — Vendor name list and detail lookups
  office.py          — Office CRUD with unique-code handling
  service_mode.py    — Service mode listing
  accounting.py      — Chart of accounts CRUD/seeding and payment diagnostics
  chart_defaults.py  — Default logistics chart of accounts
  files.py           — Rate/zone file registry and zone lookups
  rates.py           — Rate calculator (cheapest price for destination + weight)
  activity.py        — Session heartbeats / active user counts
  diagnostics.py     — Database connectivity check

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
