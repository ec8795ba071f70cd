"""Pydantic schemas package.

Folder intent:
  common.py        — CamelModel base + RecordOut (id and timestamps)
  vendor.py        — Vendor name and detail read models
  office.py        — Office write/read models
  service_mode.py  — Service mode read model
  accounting.py    — Chart of accounts and payment models, diagnostic payloads
  files.py         — Rate/zone file registry and zone models
  rate.py          — Rate calculator request and quote
  activity.py      — Session heartbeat request/summary
  diagnostics.py   — Database check and health payloads
"""
