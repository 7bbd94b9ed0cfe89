"""
QuanThink Backend: User Service
================================

What:  Business layer for users: registration, login, update, removal.
How:   Hashes passwords before they reach the store, relies on the store's
       unique-email write for duplicate detection, and verifies login
       credentials against the stored hash.
Who:   Built per request by quanthink.dependencies; called by the /users
       and /login routes.

Login Flow:
    find_by_email ──▶ absent?  ──▶ UserNotFoundError   (401 "User not found")
                  └─▶ verify   ──▶ mismatch? ──▶ WrongPasswordError (401 "Wrong password")
                               └─▶ UserResponse (200)
"""

import logging
from typing import List, Optional

from quanthink.exceptions import UserNotFoundError, WrongPasswordError
from quanthink.schemas.user import UserCreate, UserResponse, UserUpdate
from quanthink.security import hash_password, verify_password
from quanthink.stores.user_store import UserStore

logger = logging.getLogger(__name__)


class UserService:
    """
    Rules for the User entity on top of a UserStore.

    Error Handling Strategy:
        - Email collisions surface from the store as DuplicateEmailError
        - Login failures raise UnauthorizedError subclasses
        - Missing ids are returned as None for the route to turn into 404
    """

    def __init__(self, store: UserStore):
        self.store = store

    async def get_all_users(self) -> List[UserResponse]:
        records = await self.store.get_all()
        return [UserResponse.model_validate(record) for record in records]

    async def get_user_by_id(self, user_id: int) -> Optional[UserResponse]:
        record = await self.store.get_by_id(user_id)
        if record is None:
            return None
        return UserResponse.model_validate(record)

    async def find_by_email(self, email: str) -> Optional[UserResponse]:
        record = await self.store.find_by_email(email)
        if record is None:
            return None
        return UserResponse.model_validate(record)

    async def create_user(self, data: UserCreate) -> UserResponse:
        """
        Register a new user.

        The insert itself enforces email uniqueness, so there is no
        separate lookup beforehand.

        Raises:
            DuplicateEmailError: Another user already has this email
            StorageError: The insert failed for any other reason
        """
        record = await self.store.create(
            {"email": data.email, "password_hash": hash_password(data.password)}
        )
        logger.info("Registered user %s", record.id)
        return UserResponse.model_validate(record)

    async def authenticate(self, email: str, password: str) -> UserResponse:
        """
        Verify a login attempt.

        Returns:
            The user registered under `email`

        Raises:
            UserNotFoundError: No user has this email
            WrongPasswordError: The password does not match the stored hash
        """
        record = await self.store.find_by_email(email)
        if record is None:
            logger.info("Login rejected: unknown email")
            raise UserNotFoundError(email=email)

        if not verify_password(password, record.password_hash):
            logger.info("Login rejected for user %s: wrong password", record.id)
            raise WrongPasswordError(email=email)

        return UserResponse.model_validate(record)

    async def update_user(self, user_id: int, data: UserUpdate) -> Optional[UserResponse]:
        """
        Replace a user's email and password.

        Returns:
            The updated user, or None if the id is unknown

        Raises:
            DuplicateEmailError: The new email belongs to another user
        """
        record = await self.store.update(
            user_id,
            {"email": data.email, "password_hash": hash_password(data.password)},
        )
        if record is None:
            return None
        return UserResponse.model_validate(record)

    async def delete_user(self, user_id: int) -> None:
        await self.store.delete(user_id)
