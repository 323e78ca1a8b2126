"""Inventory ORM - quantity of one item type held by one account.

Invariants:
    - At most one row per (account_id, item_type)
    - quantity >= 0; purchases only ever increment it
"""

from sqlalchemy import (
    CheckConstraint, ForeignKey, Integer, String, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from coinshop.db.base import Base


class InventoryEntry(Base):
    __tablename__ = "inventory"
    __table_args__ = (
        UniqueConstraint(
            "account_id", "item_type", name="uq_inventory_account_item",
        ),
        CheckConstraint("quantity >= 0", name="quantity_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    account_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("accounts.id"), nullable=False,
    )
    item_type: Mapped[str] = mapped_column(String(255), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
