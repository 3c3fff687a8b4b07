"""Create account and message tables

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the `account` and `message` tables.
How:   Portable column types only (works on PostgreSQL and SQLite).

Rollback: downgrade() drops both tables (destructive, all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "account",
        sa.Column("account_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("account_id"),
        # Backstop for concurrent registrations of the same username
        sa.UniqueConstraint("username", name="uq_account_username"),
    )

    op.create_table(
        "message",
        sa.Column("message_id", sa.Integer(), autoincrement=True, nullable=False),
        # Not a foreign key: deleting an account leaves its messages in place
        sa.Column("posted_by", sa.Integer(), nullable=False),
        sa.Column("message_text", sa.String(255), nullable=False),
        sa.Column("time_posted_epoch", sa.BigInteger(), nullable=True),
        sa.PrimaryKeyConstraint("message_id"),
    )

    op.create_index("idx_message_posted_by", "message", ["posted_by"])


def downgrade() -> None:
    op.drop_index("idx_message_posted_by", table_name="message")
    op.drop_table("message")
    op.drop_table("account")
