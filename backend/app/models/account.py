"""
Chirper Backend — Account SQLAlchemy Model
============================================

What:  ORM model representing the `account` table.
Who:   Used by AccountGateway for lookups and inserts, and by Alembic.

Table Design:
    - Integer autoincrement primary key: ids are store-assigned on insert
    - username UNIQUE: the storage-level backstop for the register race
      (two requests both see "username free" and both insert)
    - password: stored exactly as received; login compares by equality
"""

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Account(Base):
    """
    A registered user.

    Lifecycle:
        Created by registration. Never updated or deleted by this service.
    """

    __tablename__ = "account"

    account_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    username: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    __table_args__ = (
        UniqueConstraint("username", name="uq_account_username"),
    )

    def __repr__(self) -> str:
        # No password: reprs end up in logs
        return f"<Account(account_id={self.account_id}, username='{self.username}')>"
