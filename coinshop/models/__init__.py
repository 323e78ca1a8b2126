"""ORM Models - SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so string-based relationship() references
      resolve before any query runs
"""

from coinshop.models.account import Account  # noqa: F401
from coinshop.models.inventory_entry import InventoryEntry  # noqa: F401
from coinshop.models.ledger_entry import LedgerEntry  # noqa: F401
from coinshop.models.catalog_item import CatalogItem  # noqa: F401
