"""
QuanThink Backend: User Service Tests
======================================

What:  UserService rules: registration, authentication, update.
How:   Unit tests use a mocked UserStore; the uniqueness tests run on the
       real SQLite store because the unique constraint is the mechanism.

What we test:
    ✅ Passwords are hashed before reaching the store
    ✅ authenticate: unknown email → UserNotFoundError
    ✅ authenticate: wrong password → WrongPasswordError
    ✅ authenticate: correct credentials → the stored user
    ✅ Duplicate registration raises DuplicateEmailError and stores nothing
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from quanthink.exceptions import (
    DuplicateEmailError,
    UnauthorizedError,
    UserNotFoundError,
    WrongPasswordError,
)
from quanthink.schemas.user import UserCreate, UserUpdate
from quanthink.security import hash_password, verify_password
from quanthink.services.user_service import UserService
from quanthink.stores.user_store import UserStore


def make_user(user_id=1, email="a@x.com", password="p"):
    user = MagicMock()
    user.id = user_id
    user.email = email
    user.password_hash = hash_password(password)
    return user


@pytest.fixture
def store():
    mock = MagicMock()
    mock.get_all = AsyncMock(return_value=[])
    mock.get_by_id = AsyncMock(return_value=None)
    mock.find_by_email = AsyncMock(return_value=None)
    mock.create = AsyncMock()
    mock.update = AsyncMock(return_value=None)
    mock.delete = AsyncMock(return_value=None)
    return mock


class TestUserServiceCreate:

    @pytest.mark.asyncio
    async def test_create_hashes_password(self, store):
        store.create.return_value = make_user(1)

        result = await UserService(store).create_user(UserCreate(email="a@x.com", password="p"))

        fields = store.create.await_args.args[0]
        assert fields["email"] == "a@x.com"
        assert fields["password_hash"] != "p"
        assert verify_password("p", fields["password_hash"])
        assert result.id == 1
        assert result.email == "a@x.com"

    @pytest.mark.asyncio
    async def test_create_does_not_look_up_email_first(self, store):
        store.create.return_value = make_user(1)

        await UserService(store).create_user(UserCreate(email="a@x.com", password="p"))

        store.find_by_email.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_response_has_no_password(self, store):
        store.create.return_value = make_user(1)

        result = await UserService(store).create_user(UserCreate(email="a@x.com", password="p"))

        assert set(result.model_dump()) == {"id", "email"}


class TestUserServiceAuthenticate:

    @pytest.mark.asyncio
    async def test_unknown_email(self, store):
        with pytest.raises(UserNotFoundError) as exc_info:
            await UserService(store).authenticate("nobody@x.com", "p")
        assert exc_info.value.message == "User not found"
        assert isinstance(exc_info.value, UnauthorizedError)

    @pytest.mark.asyncio
    async def test_wrong_password(self, store):
        store.find_by_email.return_value = make_user(password="p")

        with pytest.raises(WrongPasswordError) as exc_info:
            await UserService(store).authenticate("a@x.com", "wrong")
        assert exc_info.value.message == "Wrong password"

    @pytest.mark.asyncio
    async def test_correct_credentials(self, store):
        store.find_by_email.return_value = make_user(user_id=4, password="p")

        result = await UserService(store).authenticate("a@x.com", "p")

        assert result.id == 4
        assert result.email == "a@x.com"
        store.find_by_email.assert_awaited_once_with("a@x.com")


class TestUserServiceLookup:

    @pytest.mark.asyncio
    async def test_find_by_email_absent(self, store):
        assert await UserService(store).find_by_email("a@x.com") is None

    @pytest.mark.asyncio
    async def test_get_user_by_id_absent(self, store):
        assert await UserService(store).get_user_by_id(3) is None

    @pytest.mark.asyncio
    async def test_update_absent(self, store):
        result = await UserService(store).update_user(3, UserUpdate(email="a@x.com", password="q"))
        assert result is None

    @pytest.mark.asyncio
    async def test_update_rehashes_password(self, store):
        store.update.return_value = make_user(3, password="q")

        await UserService(store).update_user(3, UserUpdate(email="a@x.com", password="q"))

        user_id, fields = store.update.await_args.args
        assert user_id == 3
        assert verify_password("q", fields["password_hash"])


class TestUserServiceUniqueness:

    @pytest.mark.asyncio
    async def test_duplicate_registration(self, db_session):
        service = UserService(UserStore(db_session))
        await service.create_user(UserCreate(email="a@x.com", password="p"))
        await db_session.commit()

        with pytest.raises(DuplicateEmailError):
            await service.create_user(UserCreate(email="a@x.com", password="q"))

        users = await service.get_all_users()
        assert len(users) == 1
        # The original credentials still work
        assert (await service.authenticate("a@x.com", "p")).email == "a@x.com"
        with pytest.raises(WrongPasswordError):
            await service.authenticate("a@x.com", "q")
