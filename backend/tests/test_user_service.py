"""
Survey API Backend: User Service Unit Tests
==============================================

What:  Tests for UserService creation and credential checks with a mocked session.

What we test:
    ✅ Passwords are stored as bcrypt hashes on every creation path
    ✅ Required fields (and profileImg for the create contract)
    ✅ Duplicate email rejected by the pre-check and by the unique constraint
    ✅ Login: unknown email, wrong password, correct password
    ✅ Provider login uses its own not-found message
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from survey_api.exceptions import UnauthorizedError, ValidationError
from survey_api.models.user import User
from survey_api.schemas.user import UserCreate
from survey_api.services.user_service import UserService


def _result_with(user):
    result = MagicMock()
    result.scalar_one_or_none.return_value = user
    return result


class TestCreateUser:

    @pytest.fixture(autouse=True)
    def _service(self, pwd_context):
        self.service = UserService(pwd_context)
        self.pwd_context = pwd_context

    @pytest.mark.asyncio
    async def test_password_is_hashed(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)
        payload = UserCreate(name="Ada", email="ada@example.com", password="s3cret")

        await self.service.create_user(mock_db_session, payload)

        stored = mock_db_session.add.call_args.args[0]
        assert isinstance(stored, User)
        assert stored.password != "s3cret"
        assert self.pwd_context.verify("s3cret", stored.password)
        assert stored.god_access is False
        assert stored.profile_img is None

    @pytest.mark.asyncio
    async def test_create_contract_hashes_too(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)
        payload = UserCreate(
            name="Ada", email="ada@example.com", password="s3cret", profileImg="https://img/ada.png"
        )

        await self.service.create_user(mock_db_session, payload, require_profile_img=True)

        stored = mock_db_session.add.call_args.args[0]
        assert stored.password != "s3cret"
        assert stored.profile_img == "https://img/ada.png"

    @pytest.mark.asyncio
    async def test_missing_fields_rejected(self, mock_db_session):
        with pytest.raises(ValidationError, match="name, email, password"):
            await self.service.create_user(mock_db_session, UserCreate(email="a@b.c"))

        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_profile_img_required_for_create_contract(self, mock_db_session):
        payload = UserCreate(name="Ada", email="ada@example.com", password="s3cret")

        with pytest.raises(ValidationError, match="profileImg"):
            await self.service.create_user(mock_db_session, payload, require_profile_img=True)

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, mock_db_session):
        existing = User(id=uuid.uuid4(), name="Ada", email="ada@example.com", password="x")
        mock_db_session.execute.return_value = _result_with(existing)
        payload = UserCreate(name="Ada", email="ada@example.com", password="s3cret")

        with pytest.raises(ValidationError, match="already exists"):
            await self.service.create_user(mock_db_session, payload)

        mock_db_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_unique_constraint_race_rejected(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)
        mock_db_session.flush = AsyncMock(
            side_effect=IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))
        )
        payload = UserCreate(name="Ada", email="ada@example.com", password="s3cret")

        with pytest.raises(ValidationError, match="already exists"):
            await self.service.create_user(mock_db_session, payload)


class TestLogin:

    @pytest.fixture(autouse=True)
    def _service(self, pwd_context):
        self.service = UserService(pwd_context)
        self.user = User(
            id=uuid.uuid4(),
            name="Ada",
            email="ada@example.com",
            password=pwd_context.hash("s3cret"),
            profile_img=None,
            god_access=False,
        )

    @pytest.mark.asyncio
    async def test_correct_password(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(self.user)

        document = await self.service.login(mock_db_session, "ada@example.com", "s3cret")

        assert document.email == "ada@example.com"
        assert "password" not in document.model_dump()

    @pytest.mark.asyncio
    async def test_wrong_password(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(self.user)

        with pytest.raises(UnauthorizedError):
            await self.service.login(mock_db_session, "ada@example.com", "nope")

    @pytest.mark.asyncio
    async def test_unknown_email(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)

        with pytest.raises(UnauthorizedError, match="Invalid credentials"):
            await self.service.login(mock_db_session, "ghost@example.com", "s3cret")

    @pytest.mark.asyncio
    async def test_plaintext_stored_value_never_matches(self, mock_db_session):
        self.user.password = "s3cret"
        mock_db_session.execute.return_value = _result_with(self.user)

        with pytest.raises(UnauthorizedError):
            await self.service.login(mock_db_session, "ada@example.com", "s3cret")

    @pytest.mark.asyncio
    async def test_provider_not_found_message(self, mock_db_session):
        mock_db_session.execute.return_value = _result_with(None)

        with pytest.raises(UnauthorizedError, match="Provider not found"):
            await self.service.provider_login(mock_db_session, "ghost@example.com", "s3cret")
