"""
Chirper Backend — Message SQLAlchemy Model
============================================

What:  ORM model representing the `message` table.
Who:   Used by MessageGateway for CRUD operations, and by Alembic.

Table Design:
    - Integer autoincrement primary key: also defines "store order" for listings
    - posted_by: plain integer, NOT a foreign key. The author must exist when
      the message is posted; nothing ties the two rows together afterwards.
    - message_text VARCHAR(255): matches the 255-character validation limit
    - time_posted_epoch: opaque client-supplied value, stored and echoed back

    Index on posted_by:
        Serves GET /accounts/{accountId}/messages
"""

from typing import Optional

from sqlalchemy import BigInteger, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Message(Base):
    """
    A text message posted by an account.

    Lifecycle:
        1. Created by POST /messages
        2. Text replaced by PATCH /messages/{id} (nothing else is mutable)
        3. Removed by DELETE /messages/{id} (hard delete)
    """

    __tablename__ = "message"

    message_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    posted_by: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )

    message_text: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    time_posted_epoch: Mapped[Optional[int]] = mapped_column(
        BigInteger,
        nullable=True,
        default=None,
    )

    __table_args__ = (
        Index("idx_message_posted_by", "posted_by"),
    )

    def __repr__(self) -> str:
        return (
            f"<Message(message_id={self.message_id}, posted_by={self.posted_by}, "
            f"length={len(self.message_text or '')})>"
        )
