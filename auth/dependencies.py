"""
FastAPI dependencies for authentication.

Provides ``db_session``, ``get_auth_service`` and ``get_current_user_id``
dependencies that are used across the auth and task routes.
"""

from __future__ import annotations

from typing import AsyncGenerator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from auth.errors import UnauthorizedError
from auth.service import AuthService
from auth.store import UserStore
from config.settings import Settings
from database.session import get_db_session

# auto_error=False so a missing header goes through our own 401 body.
_bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


async def get_auth_service(
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    store = UserStore(session, bcrypt_rounds=settings.bcrypt_rounds)
    return AuthService(
        store,
        jwt_secret=settings.jwt_secret,
        token_expiry_days=settings.jwt_expiry_days,
    )


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Extract and verify the Bearer token, returning the authenticated
    user id (UUID string).
    """
    from auth.tokens import decode_token

    if credentials is None:
        raise UnauthorizedError("Not authorized, no token")
    return str(decode_token(credentials.credentials, settings.jwt_secret)["id"])
