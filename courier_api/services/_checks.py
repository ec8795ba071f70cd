"""Presence checks shared by services."""


def missing(*values: str | None) -> bool:
    """True when any value is absent or blank."""
    return any(v is None or not str(v).strip() for v in values)
