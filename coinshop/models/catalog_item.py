"""Catalog ORM - purchasable item and its price (read-only reference data)."""

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from coinshop.db.base import Base


class CatalogItem(Base):
    __tablename__ = "catalog_items"
    __table_args__ = (
        CheckConstraint("price > 0", name="price_positive"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    item_name: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True,
    )
    price: Mapped[int] = mapped_column(Integer, nullable=False)
