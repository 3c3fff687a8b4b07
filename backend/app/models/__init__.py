# Importing the models registers them on Base.metadata (Alembic, create_all)
from app.models.account import Account
from app.models.message import Message

__all__ = ["Account", "Message"]
