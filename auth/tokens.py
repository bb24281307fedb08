"""
JWT session token creation and verification.

Tokens are HS256-signed JWTs carrying the user id (``id``), the issue time
(``iat``) and the expiry (``exp``). The secret comes from
``config.jwt_secret`` (env var: ``JWT_SECRET``).
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from auth.errors import UnauthorizedError

logger = logging.getLogger(__name__)

_ALGORITHM = "HS256"


def create_token(
    user_id: str,
    secret: str,
    expiry_days: int = 30,
    now: Optional[datetime] = None,
) -> str:
    """Create a signed token containing ``user_id`` and expiry."""
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "id": user_id,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=expiry_days),
    }
    return jwt.encode(payload, secret, algorithm=_ALGORITHM)


def decode_token(token: str, secret: str) -> Dict[str, Any]:
    """
    Verify ``token`` and return its claims.

    Raises ``UnauthorizedError`` on a bad signature, an expired token or a
    payload without ``id``.
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[_ALGORITHM],
            options={"require": ["id", "exp"]},
        )
    except jwt.InvalidTokenError as exc:
        logger.debug("Rejected token: %s", exc)
        raise UnauthorizedError() from exc
    return payload
