"""
Chirper Backend — Message Gateway
===================================

What:  Translates message operations into Store (AsyncSession) calls.
Who:   Constructed per request by app.dependencies; used by RequestHandler.

Affected-row normalization:
    delete_by_id and update_text_by_id run single-statement DELETE / UPDATE
    and return the row count, or None when no row matched. Callers can tell
    "touched a row" from "no-op" without a second query.

Ordering:
    Listings are ordered by message_id ascending (insertion order).

Ids outside the INTEGER column range match no row and are answered as
absent without a round trip.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import is_storable_id
from app.exceptions import DatabaseError
from app.models.message import Message

logger = logging.getLogger(__name__)


class MessageGateway:
    """Message CRUD. Absent rows and zero counts come back as None."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def insert(
        self,
        posted_by: int,
        message_text: str,
        time_posted_epoch: Optional[int] = None,
    ) -> Message:
        message = Message(
            posted_by=posted_by,
            message_text=message_text,
            time_posted_epoch=time_posted_epoch,
        )
        self._session.add(message)
        try:
            await self._session.flush()  # Assigns message_id without committing
        except SQLAlchemyError as e:
            logger.error("Database error inserting message: %s", str(e), exc_info=True)
            raise DatabaseError(context={"posted_by": posted_by, "error_type": type(e).__name__})
        return message

    async def find_by_id(self, message_id: int) -> Optional[Message]:
        if not is_storable_id(message_id):
            return None
        try:
            return await self._session.get(Message, message_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching message %s: %s", message_id, str(e))
            raise DatabaseError(context={"message_id": message_id, "error_type": type(e).__name__})

    async def find_all(self) -> List[Message]:
        return await self._all(select(Message).order_by(Message.message_id))

    async def find_all_by_posted_by(self, account_id: int) -> List[Message]:
        if not is_storable_id(account_id):
            return []
        return await self._all(
            select(Message)
            .where(Message.posted_by == account_id)
            .order_by(Message.message_id)
        )

    async def delete_by_id(self, message_id: int) -> Optional[int]:
        """Returns the number of rows deleted, or None if nothing matched."""
        return await self._rowcount(
            delete(Message).where(Message.message_id == message_id),
            message_id,
        )

    async def update_text_by_id(self, message_id: int, message_text: str) -> Optional[int]:
        """Returns the number of rows updated, or None if nothing matched."""
        return await self._rowcount(
            update(Message)
            .where(Message.message_id == message_id)
            .values(message_text=message_text),
            message_id,
        )

    async def _all(self, query) -> List[Message]:
        try:
            result = await self._session.execute(query)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing messages: %s", str(e), exc_info=True)
            raise DatabaseError(context={"error_type": type(e).__name__})

    async def _rowcount(self, statement, message_id: int) -> Optional[int]:
        if not is_storable_id(message_id):
            return None
        try:
            result = await self._session.execute(statement)
        except SQLAlchemyError as e:
            logger.error("Database error modifying message %s: %s", message_id, str(e), exc_info=True)
            raise DatabaseError(context={"message_id": message_id, "error_type": type(e).__name__})
        rows_affected = result.rowcount
        return rows_affected if rows_affected > 0 else None
