"""
Chirper Backend — Request Handler (Business Rules)
====================================================

What:  Validates account and message payloads, calls the gateways, and
       decides what each outcome means.
Why:   All business rules live here; routes only speak HTTP and gateways
       only speak SQL.
How:   Holds an AccountGateway and a MessageGateway (constructor injection).
       Success returns the response body, where None means "200 with an
       empty body". Failures raise InvalidInputError / ConflictError /
       UnauthorizedError, which the global handlers map to 400 / 409 / 401.
Who:   Built per request by app.dependencies.get_request_handler.

Absence semantics (kept as-is for client compatibility):
    get_message     missing id  → None (200, empty body)
    delete_message  missing id  → None (200, empty body)
    update_message  missing id  → InvalidInputError (400)
    post_message    unknown author → InvalidInputError (400)

Validation rules:
    username   not blank
    password   at least PASSWORD_MIN_LENGTH characters
    text       not blank, at most MESSAGE_MAX_LENGTH characters
    "Blank" means empty or whitespace only.
"""

import logging
from typing import List, Optional

from app.exceptions import ConflictError, InvalidInputError, UnauthorizedError
from app.gateways.account_gateway import AccountGateway
from app.gateways.message_gateway import MessageGateway
from app.models.account import Account
from app.models.message import Message
from app.schemas.account import AccountCredentials
from app.schemas.message import MessageCreate

logger = logging.getLogger(__name__)

PASSWORD_MIN_LENGTH = 4
MESSAGE_MAX_LENGTH = 255


def is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def is_valid_message_text(text: Optional[str]) -> bool:
    return not is_blank(text) and len(text) <= MESSAGE_MAX_LENGTH


class RequestHandler:
    """
    Business logic for accounts and messages.

    Stateless apart from the two gateways, which share the request's
    session. Store failures raised by the gateways (DatabaseError) pass
    through untouched.
    """

    def __init__(self, accounts: AccountGateway, messages: MessageGateway):
        self.accounts = accounts
        self.messages = messages

    # ── Accounts ──────────────────────────────────────────────────────────

    async def register_account(self, candidate: AccountCredentials) -> Account:
        """
        Register a new account.

        Order matters: the uniqueness check runs before format validation,
        so a taken username is always reported as a conflict.

        Raises:
            ConflictError: Username already exists (found by lookup, or
                           rejected by the unique constraint on insert)
            InvalidInputError: Blank username or password too short
        """
        username = candidate.username
        password = candidate.password

        if await self.accounts.find_by_username(username) is not None:
            logger.info("Registration rejected: username %r is taken", username)
            raise ConflictError(context={"username": username})

        if is_blank(username):
            raise InvalidInputError(message="Username must not be blank", field="username")
        if len(password) < PASSWORD_MIN_LENGTH:
            raise InvalidInputError(
                message=f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
                field="password",
            )

        account = await self.accounts.insert(username=username, password=password)
        if account is None:
            logger.info("Registration lost a race: username %r is taken", username)
            raise ConflictError(context={"username": username})

        logger.info("Registered account %s (%s)", account.account_id, account.username)
        return account

    async def login(self, candidate: AccountCredentials) -> Account:
        """
        Match a username/password pair against stored accounts.

        Raises:
            UnauthorizedError: No account has exactly this username and password
        """
        account = await self.accounts.find_by_username_and_password(
            candidate.username, candidate.password
        )
        if account is None:
            logger.info("Login failed for username %r", candidate.username)
            raise UnauthorizedError(context={"username": candidate.username})
        return account

    # ── Messages ──────────────────────────────────────────────────────────

    async def post_message(self, candidate: MessageCreate) -> Message:
        """
        Persist a new message.

        Raises:
            InvalidInputError: Text is blank or too long, or postedBy does not
                               reference an existing account
        """
        if not is_valid_message_text(candidate.message_text):
            raise InvalidInputError(
                message=f"Message text must be 1-{MESSAGE_MAX_LENGTH} non-blank characters",
                field="messageText",
            )
        if await self.accounts.find_by_id(candidate.posted_by) is None:
            raise InvalidInputError(
                message="Message author does not exist",
                field="postedBy",
                context={"posted_by": candidate.posted_by},
            )

        message = await self.messages.insert(
            posted_by=candidate.posted_by,
            message_text=candidate.message_text,
            time_posted_epoch=candidate.time_posted_epoch,
        )
        logger.info("Account %s posted message %s", message.posted_by, message.message_id)
        return message

    async def list_messages(self) -> List[Message]:
        return await self.messages.find_all()

    async def get_message(self, message_id: int) -> Optional[Message]:
        """Returns the message, or None when it does not exist (not an error)."""
        return await self.messages.find_by_id(message_id)

    async def list_messages_by_author(self, account_id: int) -> List[Message]:
        # The account itself is not checked; an unknown id simply has no messages
        return await self.messages.find_all_by_posted_by(account_id)

    async def delete_message(self, message_id: int) -> Optional[int]:
        """Returns the rows deleted, or None when nothing matched (idempotent)."""
        rows_affected = await self.messages.delete_by_id(message_id)
        if rows_affected:
            logger.info("Deleted message %s", message_id)
        return rows_affected

    async def update_message(self, message_id: int, message_text: str) -> Optional[int]:
        """
        Replace a message's text.

        Raises:
            InvalidInputError: Message does not exist, or the new text is
                               blank or too long
        """
        if await self.messages.find_by_id(message_id) is None:
            raise InvalidInputError(
                message="Message does not exist",
                field="messageId",
                context={"message_id": message_id},
            )
        if not is_valid_message_text(message_text):
            raise InvalidInputError(
                message=f"Message text must be 1-{MESSAGE_MAX_LENGTH} non-blank characters",
                field="messageText",
            )

        rows_affected = await self.messages.update_text_by_id(message_id, message_text)
        logger.info("Updated message %s (%s rows)", message_id, rows_affected)
        return rows_affected
