"""Routers package — HTTP endpoint definitions.

Every endpoint is versioned and mounted under /api/v1 (see v1/).
/health is declared on the app itself in courier_api/main.py.
"""
