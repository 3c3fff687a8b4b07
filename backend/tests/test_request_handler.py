"""
Chirper Backend — RequestHandler Unit Tests
=============================================

What:  Tests for the business rules in RequestHandler.
How:   Gateways are AsyncMock doubles (no database).

What we test:
    ✅ Registration: conflict before validation, blank username, short password,
       unique-constraint race
    ✅ Login: exact credential match, mismatch → UnauthorizedError
    ✅ Posting: text length boundaries, blank text, unknown author
    ✅ Get / delete absence returns None instead of raising
    ✅ Update: missing message, bad text, success count
"""

import pytest

from app.exceptions import ConflictError, InvalidInputError, UnauthorizedError
from app.models.account import Account
from app.models.message import Message
from app.schemas.account import AccountCredentials
from app.schemas.message import MessageCreate
from app.services.request_handler import RequestHandler, is_blank, is_valid_message_text


class TestValidationHelpers:

    def test_blank_values(self):
        assert is_blank("")
        assert is_blank("   ")
        assert is_blank("\t\n")
        assert is_blank(None)
        assert not is_blank(" a ")

    def test_message_text_boundaries(self):
        assert not is_valid_message_text("")
        assert not is_valid_message_text(" " * 10)
        assert is_valid_message_text("a")
        assert is_valid_message_text("a" * 255)
        assert not is_valid_message_text("a" * 256)


class TestRegisterAccount:
    """Tests for the registration rules."""

    @pytest.fixture(autouse=True)
    def _handler(self, mock_accounts, mock_messages):
        self.accounts = mock_accounts
        self.handler = RequestHandler(mock_accounts, mock_messages)

    @pytest.mark.asyncio
    async def test_register_success_returns_persisted_account(self):
        self.accounts.insert.return_value = Account(
            account_id=7, username="newuser", password="secret"
        )

        result = await self.handler.register_account(
            AccountCredentials(username="newuser", password="secret")
        )

        assert result.account_id == 7
        self.accounts.insert.assert_awaited_once_with(username="newuser", password="secret")

    @pytest.mark.asyncio
    async def test_register_taken_username_conflicts_regardless_of_password(self, sample_account):
        self.accounts.find_by_username.return_value = sample_account

        with pytest.raises(ConflictError):
            await self.handler.register_account(
                AccountCredentials(username="testuser1", password="a-different-password")
            )
        self.accounts.insert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_register_conflict_checked_before_format(self, sample_account):
        """A taken username with a too-short password is a conflict, not invalid input."""
        self.accounts.find_by_username.return_value = sample_account

        with pytest.raises(ConflictError):
            await self.handler.register_account(
                AccountCredentials(username="testuser1", password="x")
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username", ["", " ", "   \t"])
    async def test_register_blank_username_is_invalid(self, username):
        with pytest.raises(InvalidInputError) as exc_info:
            await self.handler.register_account(
                AccountCredentials(username=username, password="password")
            )
        assert exc_info.value.field == "username"
        self.accounts.insert.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("password", ["", "a", "ab", "abc"])
    async def test_register_short_password_is_invalid(self, password):
        with pytest.raises(InvalidInputError) as exc_info:
            await self.handler.register_account(
                AccountCredentials(username="newuser", password=password)
            )
        assert exc_info.value.field == "password"

    @pytest.mark.asyncio
    async def test_register_four_character_password_is_accepted(self):
        self.accounts.insert.return_value = Account(account_id=2, username="u", password="abcd")

        result = await self.handler.register_account(
            AccountCredentials(username="u", password="abcd")
        )

        assert result.account_id == 2

    @pytest.mark.asyncio
    async def test_register_unique_constraint_race_is_conflict(self):
        """Lookup says free, but the insert is rejected by the unique constraint."""
        self.accounts.insert.return_value = None

        with pytest.raises(ConflictError):
            await self.handler.register_account(
                AccountCredentials(username="racer", password="password")
            )


class TestLogin:

    @pytest.fixture(autouse=True)
    def _handler(self, mock_accounts, mock_messages):
        self.accounts = mock_accounts
        self.handler = RequestHandler(mock_accounts, mock_messages)

    @pytest.mark.asyncio
    async def test_login_returns_matching_account(self, sample_account):
        self.accounts.find_by_username_and_password.return_value = sample_account

        result = await self.handler.login(
            AccountCredentials(username="testuser1", password="password")
        )

        assert result is sample_account
        self.accounts.find_by_username_and_password.assert_awaited_once_with(
            "testuser1", "password"
        )

    @pytest.mark.asyncio
    async def test_login_mismatch_is_unauthorized(self):
        with pytest.raises(UnauthorizedError):
            await self.handler.login(
                AccountCredentials(username="testuser1", password="wrong")
            )

    @pytest.mark.asyncio
    async def test_login_does_not_validate_format(self):
        """Blank credentials are simply a non-match, never InvalidInputError."""
        with pytest.raises(UnauthorizedError):
            await self.handler.login(AccountCredentials(username="", password=""))


class TestPostMessage:

    @pytest.fixture(autouse=True)
    def _handler(self, mock_accounts, mock_messages, sample_account):
        self.accounts = mock_accounts
        self.messages = mock_messages
        self.accounts.find_by_id.return_value = sample_account
        self.messages.insert.side_effect = lambda posted_by, message_text, time_posted_epoch: Message(
            message_id=99,
            posted_by=posted_by,
            message_text=message_text,
            time_posted_epoch=time_posted_epoch,
        )
        self.handler = RequestHandler(mock_accounts, mock_messages)

    @pytest.mark.asyncio
    async def test_post_message_success(self):
        result = await self.handler.post_message(
            MessageCreate(posted_by=1, message_text="hello", time_posted_epoch=1669947792)
        )

        assert result.message_id == 99
        assert result.message_text == "hello"
        assert result.time_posted_epoch == 1669947792
        self.accounts.find_by_id.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_post_message_255_characters_accepted(self):
        result = await self.handler.post_message(
            MessageCreate(posted_by=1, message_text="a" * 255)
        )
        assert len(result.message_text) == 255

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "    ", "a" * 256])
    async def test_post_message_bad_text_is_invalid(self, text):
        with pytest.raises(InvalidInputError) as exc_info:
            await self.handler.post_message(MessageCreate(posted_by=1, message_text=text))
        assert exc_info.value.field == "messageText"
        self.messages.insert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_post_message_text_checked_before_author(self):
        await_count_before = self.accounts.find_by_id.await_count
        with pytest.raises(InvalidInputError):
            await self.handler.post_message(MessageCreate(posted_by=1, message_text=""))
        assert self.accounts.find_by_id.await_count == await_count_before

    @pytest.mark.asyncio
    async def test_post_message_unknown_author_is_invalid(self):
        self.accounts.find_by_id.return_value = None

        with pytest.raises(InvalidInputError) as exc_info:
            await self.handler.post_message(MessageCreate(posted_by=404, message_text="hello"))

        assert exc_info.value.field == "postedBy"
        self.messages.insert.assert_not_awaited()


class TestMessageQueries:

    @pytest.fixture(autouse=True)
    def _handler(self, mock_accounts, mock_messages):
        self.messages = mock_messages
        self.handler = RequestHandler(mock_accounts, mock_messages)

    @pytest.mark.asyncio
    async def test_list_messages_empty(self):
        assert await self.handler.list_messages() == []

    @pytest.mark.asyncio
    async def test_list_messages_passes_store_order_through(self, sample_message):
        second = Message(message_id=2, posted_by=1, message_text="second")
        self.messages.find_all.return_value = [sample_message, second]

        result = await self.handler.list_messages()

        assert [m.message_id for m in result] == [1, 2]

    @pytest.mark.asyncio
    async def test_get_message_found(self, sample_message):
        self.messages.find_by_id.return_value = sample_message
        assert await self.handler.get_message(1) is sample_message

    @pytest.mark.asyncio
    async def test_get_message_missing_returns_none(self):
        assert await self.handler.get_message(12345) is None

    @pytest.mark.asyncio
    async def test_list_messages_by_author(self, sample_message):
        self.messages.find_all_by_posted_by.return_value = [sample_message]

        result = await self.handler.list_messages_by_author(1)

        assert result == [sample_message]
        self.messages.find_all_by_posted_by.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_delete_message_returns_count(self):
        self.messages.delete_by_id.return_value = 1
        assert await self.handler.delete_message(1) == 1

    @pytest.mark.asyncio
    async def test_delete_missing_message_returns_none(self):
        assert await self.handler.delete_message(12345) is None


class TestUpdateMessage:

    @pytest.fixture(autouse=True)
    def _handler(self, mock_accounts, mock_messages, sample_message):
        self.messages = mock_messages
        self.messages.find_by_id.return_value = sample_message
        self.messages.update_text_by_id.return_value = 1
        self.handler = RequestHandler(mock_accounts, mock_messages)

    @pytest.mark.asyncio
    async def test_update_message_success(self):
        result = await self.handler.update_message(1, "updated text")

        assert result == 1
        self.messages.update_text_by_id.assert_awaited_once_with(1, "updated text")

    @pytest.mark.asyncio
    async def test_update_missing_message_is_invalid(self):
        self.messages.find_by_id.return_value = None

        with pytest.raises(InvalidInputError) as exc_info:
            await self.handler.update_message(12345, "updated text")

        assert exc_info.value.field == "messageId"
        self.messages.update_text_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "  ", "a" * 256])
    async def test_update_bad_text_is_invalid(self, text):
        with pytest.raises(InvalidInputError):
            await self.handler.update_message(1, text)
        self.messages.update_text_by_id.assert_not_awaited()
