"""
QuanThink Backend: User SQLAlchemy Model
=========================================

What:  ORM model representing the `users` table.
Who:   Used by UserStore and by Alembic for schema management.

Invariants:
    - email is unique across all users (enforced by uq_users_email)
    - password_hash is never a plaintext password; see quanthink.security
"""

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from quanthink.database import Base


class User(Base):
    """A registered QuanThink user."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Login name; unique across users",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="pbkdf2_sha256$<iterations>$<salt>$<digest>",
    )

    # Two concurrent inserts with the same email cannot both commit.
    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
