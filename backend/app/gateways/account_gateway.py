"""
Chirper Backend — Account Gateway
===================================

What:  Translates account queries into Store (AsyncSession) calls.
Who:   Constructed per request by app.dependencies; used by RequestHandler.

Query plans:
    find_by_username               → uq_account_username index
    find_by_username_and_password  → uq_account_username index + filter
    find_by_id                     → primary key
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import is_storable_id
from app.exceptions import DatabaseError
from app.models.account import Account

logger = logging.getLogger(__name__)


class AccountGateway:
    """Account lookups and inserts. Absent rows come back as None."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_username(self, username: str) -> Optional[Account]:
        return await self._first(select(Account).where(Account.username == username))

    async def find_by_username_and_password(
        self, username: str, password: str
    ) -> Optional[Account]:
        """Exact match on both fields; the password is compared as stored."""
        return await self._first(
            select(Account).where(
                Account.username == username,
                Account.password == password,
            )
        )

    async def find_by_id(self, account_id: Optional[int]) -> Optional[Account]:
        if account_id is None or not is_storable_id(account_id):
            return None
        try:
            return await self._session.get(Account, account_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching account %s: %s", account_id, str(e))
            raise DatabaseError(context={"account_id": account_id, "error_type": type(e).__name__})

    async def insert(self, username: str, password: str) -> Optional[Account]:
        """
        Persist a new account and return it with its assigned id.

        Returns:
            The persisted Account, or None when the unique constraint on
            username rejected the row (a concurrent registration won).

        Note:
            The constraint violation rolls the session back. Registration
            writes nothing else in the request, so nothing else is lost.
        """
        account = Account(username=username, password=password)
        self._session.add(account)
        try:
            await self._session.flush()  # Assigns account_id without committing
        except IntegrityError:
            await self._session.rollback()
            logger.info("Insert rejected by unique constraint for username=%r", username)
            return None
        except SQLAlchemyError as e:
            logger.error("Database error inserting account: %s", str(e), exc_info=True)
            raise DatabaseError(context={"error_type": type(e).__name__})
        return account

    async def _first(self, query) -> Optional[Account]:
        try:
            result = await self._session.execute(query)
            return result.scalars().first()
        except SQLAlchemyError as e:
            logger.error("Database error querying accounts: %s", str(e))
            raise DatabaseError(context={"error_type": type(e).__name__})
