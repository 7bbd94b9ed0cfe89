"""Create calculations and users tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Initial schema: `calculations` and `users`.
Rollback: downgrade() drops both tables (all data lost).
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
    """Create both tables. Column docs live in quanthink/models/."""
    op.create_table(
        "calculations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "expression",
            sa.Text(),
            nullable=False,
            comment="Input submitted by the user",
        ),
        sa.Column(
            "result",
            sa.Text(),
            nullable=True,
            comment="Computed answer, null until available",
        ),
        sa.Column(
            "library",
            sa.String(50),
            nullable=True,
            comment="Client-side library selection, e.g. JAVA",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this calculation was stored (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "email",
            sa.String(255),
            nullable=False,
            comment="Login name; unique across users",
        ),
        sa.Column(
            "password_hash",
            sa.String(255),
            nullable=False,
            comment="pbkdf2_sha256$<iterations>$<salt>$<digest>",
        ),
        sa.PrimaryKeyConstraint("id"),
        # Backs login lookups and makes duplicate registration atomic
        sa.UniqueConstraint("email", name="uq_users_email"),
    )


def downgrade() -> None:
    """Drop both tables. Destructive."""
    op.drop_table("users")
    op.drop_table("calculations")
