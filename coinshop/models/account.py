"""Account ORM - a user's identity, password hash and coin balance.

Invariants:
    - username is unique and non-empty
    - coins >= 0 (CHECK constraint backs the guarded debit in the store)
    - Rows are never deleted in normal operation
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from coinshop.db.base import Base


class Account(Base):
    """Account row; balance changes only through the workflows."""
    __tablename__ = "accounts"
    __table_args__ = (
        CheckConstraint("coins >= 0", name="coins_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    coins: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
