"""
User store — lookup, creation and password checks over the ``users`` table.

The store wraps one ``AsyncSession``; it is built per request and handed to
``AuthService`` so tests can swap in a fake.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.errors import DuplicateUserError, ValidationError
from auth.password import dummy_verify, hash_password, verify_password
from database.models import User

logger = logging.getLogger(__name__)


class UserStore:
    """Persisted user records with a storage-enforced unique email.

    Args:
        session: Open async session; ``create`` commits on it.
        bcrypt_rounds: Work factor used for new password hashes.
    """

    def __init__(self, session: AsyncSession, bcrypt_rounds: int = 12) -> None:
        self._session = session
        self._bcrypt_rounds = bcrypt_rounds

    async def find_by_email(self, email: str) -> Optional[User]:
        """Exact, case-sensitive lookup by email."""
        result = await self._session.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    async def create(self, username: str, email: str, raw_password: str) -> User:
        """Hash ``raw_password`` and persist a new user.

        Raises ``ValidationError`` if a field is missing and
        ``DuplicateUserError`` if the database rejects the email as taken.
        """
        missing = [
            name
            for name, value in (
                ("username", username),
                ("email", email),
                ("password", raw_password),
            )
            if not value
        ]
        if missing:
            logger.debug("User create rejected, missing %s", ", ".join(missing))
            raise ValidationError()

        # bcrypt is CPU-bound; keep it off the event loop
        password_hash = await asyncio.to_thread(
            hash_password, raw_password, rounds=self._bcrypt_rounds
        )
        user = User(
            user_id=uuid.uuid4(),
            username=username,
            email=email,
            password_hash=password_hash,
        )
        self._session.add(user)
        try:
            await self._session.flush()
            await self._session.commit()
        except IntegrityError as exc:
            await self._session.rollback()
            logger.info("Unique constraint rejected email %s", email)
            raise DuplicateUserError() from exc
        return user

    async def verify_password(self, user: Optional[User], candidate: str) -> bool:
        """Check ``candidate`` against the stored hash.

        With ``user=None`` a dummy check runs and ``False`` is returned, so
        both failure paths take the same time.
        """
        if user is None:
            await asyncio.to_thread(dummy_verify, candidate, rounds=self._bcrypt_rounds)
            return False
        return await asyncio.to_thread(verify_password, candidate, user.password_hash)
