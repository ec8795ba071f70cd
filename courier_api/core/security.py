"""Session token helpers (PyJWT, HMAC-SHA256)."""

import hashlib
from typing import Any

import jwt
from jwt.exceptions import InvalidTokenError

from courier_api.core.config import settings
from courier_api.core.exceptions import UnauthorizedError

ALGORITHM = "HS256"


def decode_token(token: str, secret: str | None = None) -> dict[str, Any]:
    """Verify *token* and return its payload.

    Raises :class:`UnauthorizedError` for bad signatures, expired or
    malformed tokens.
    """
    try:
        return jwt.decode(token, secret or settings.jwt_secret, algorithms=[ALGORITHM])
    except InvalidTokenError as exc:
        raise UnauthorizedError("Invalid token") from exc


def user_id_from_payload(payload: dict[str, Any]) -> int:
    """Tokens issued by the portal carry the user id in ``id`` (older) or ``sub``."""
    raw = payload.get("id", payload.get("sub"))
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise UnauthorizedError("Invalid token") from exc


def hash_token(token: str) -> str:
    """Tokens are never stored; activity rows are keyed by their SHA-256."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
