"""
QuanThink Backend: Calculation SQLAlchemy Model
================================================

What:  ORM model representing the `calculations` table.
Who:   Used by CalculationStore for CRUD operations and by Alembic for schema management.

Table Design:
    - id: Integer primary key, assigned by the database on insert
    - expression: What the user asked the assistant to compute
    - result: The answer shown back to the user (may be filled in later)
    - library: Library selected in the client when the question was asked
    - created_at: UTC with timezone, set once on insert
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from quanthink.database import Base


class Calculation(Base):
    """
    A calculation saved by the web client.

    Lifecycle:
        1. Created by POST /calculations
        2. Replaced field-by-field by PUT /calculations/{id}
        3. Removed by DELETE /calculations/{id}
    """

    __tablename__ = "calculations"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    expression: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Input submitted by the user",
    )

    result: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
        comment="Computed answer, null until available",
    )

    library: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
        default=None,
        comment="Client-side library selection, e.g. JAVA",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this calculation was stored (UTC)",
    )

    def __repr__(self) -> str:
        return f"<Calculation(id={self.id}, expression='{self.expression[:30]}')>"
