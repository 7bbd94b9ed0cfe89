"""
QuanThink Backend: User Store
==============================

What:  EntityStore for users plus lookup by email.
How:   Email uniqueness is enforced by the uq_users_email constraint; a
       violation during create/update is reported as DuplicateEmailError,
       so "check then insert" is one atomic write.
"""

from typing import Any, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from quanthink.exceptions import DuplicateEmailError
from quanthink.models.user import User
from quanthink.stores.base import EntityStore

# How a uq_users_email violation reads: Postgres names the constraint,
# SQLite the table and column
EMAIL_UNIQUE_MARKERS = (
    "uq_users_email",
    "UNIQUE constraint failed: users.email",
)


class UserStore(EntityStore[User]):
    model = User

    async def find_by_email(self, email: str) -> Optional[User]:
        """The user registered under exactly this email, or None."""
        try:
            result = await self.session.execute(
                select(User).where(User.email == email)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._storage_error("find_by_email", e)

    def on_integrity_error(self, error: IntegrityError, fields: Mapping[str, Any]) -> None:
        message = str(error.orig)
        if any(marker in message for marker in EMAIL_UNIQUE_MARKERS):
            raise DuplicateEmailError(email=fields.get("email"))
