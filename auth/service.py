"""
Register / login flows.

``AuthService`` holds no state beyond its injected collaborators: a
``UserStore`` bound to the request's session and the token settings.
"""

from __future__ import annotations

import logging

from auth.errors import (
    AppError,
    DuplicateUserError,
    InternalError,
    InvalidCredentialsError,
)
from auth.store import UserStore
from auth.tokens import create_token

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(
        self,
        store: UserStore,
        jwt_secret: str,
        token_expiry_days: int = 30,
    ) -> None:
        self._store = store
        self._jwt_secret = jwt_secret
        self._token_expiry_days = token_expiry_days

    def _issue_token(self, user_id: str) -> str:
        return create_token(user_id, self._jwt_secret, expiry_days=self._token_expiry_days)

    async def register(self, username: str, email: str, password: str) -> str:
        """Create the user and return a session token for it."""
        try:
            # Advisory only; the unique index in ``create`` is authoritative.
            if await self._store.find_by_email(email) is not None:
                raise DuplicateUserError()

            user = await self._store.create(username, email, password)
            token = self._issue_token(str(user.user_id))
        except AppError:
            raise
        except Exception as exc:
            logger.exception("Registration failed for %s", email)
            raise InternalError("Error registering user") from exc

        logger.info("Registered user %s (%s)", username, user.user_id)
        return token

    async def login(self, email: str, password: str) -> str:
        """Return a session token if ``password`` matches the user's hash."""
        try:
            user = await self._store.find_by_email(email)
            if not await self._store.verify_password(user, password):
                logger.info("Rejected login for %s", email)
                raise InvalidCredentialsError()

            token = self._issue_token(str(user.user_id))
        except AppError:
            raise
        except Exception as exc:
            logger.exception("Login failed for %s", email)
            raise InternalError("Error logging in") from exc

        logger.info("Login: %s (%s)", user.username, user.user_id)
        return token
