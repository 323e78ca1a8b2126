"""Purchase Workflow - spend coins on a catalog item.

Invariants:
    - Validation order: item name, catalog price, account, balance
      (see core/enforce_purchase.py)
    - Debit and inventory upsert commit together or not at all
    - Purchases write no ledger entry and credit nobody: spent coins leave
      circulation
    - After a committed purchase: coins_after == coins_before - price and the
      item's quantity grew by exactly 1
"""

import logging

from coinshop.core.enforce_purchase import (
    check_price, check_purchase, require_item_name,
)
from coinshop.core.errors import CoinShopError, ErrorKind, InsufficientCoinsError
from coinshop.core.repository_protocols import (
    AccountStore, Catalog, InventoryStore, Transactional,
)
from coinshop.services.atomic_unit import atomic

logger = logging.getLogger(__name__)


class PurchaseWorkflow:
    """Validated, atomic coin-for-item exchange."""

    def __init__(
        self, accounts: AccountStore, inventory: InventoryStore,
        catalog: Catalog, tx: Transactional,
    ):
        self.accounts = accounts
        self.inventory = inventory
        self.catalog = catalog
        self.tx = tx

    async def buy_item(self, username: str, item_name: str) -> None:
        """Debit the item's price and add one unit to the buyer's inventory."""
        logger.debug(
            f"buy_item {item_name!r} for {username}",
            extra={"username": username, "item": item_name},
        )
        try:
            item = require_item_name(item_name)
            async with atomic(self.tx, "buy_item"):
                price = await self._buy(username, item)
        except CoinShopError as e:
            if e.kind is not ErrorKind.INTERNAL:
                logger.warning(
                    f"Purchase rejected: {e.message}",
                    extra={
                        "username": username, "item": item_name,
                        "error_code": e.code,
                    },
                )
            raise
        logger.info(
            f"Bought {item} for {price} coins",
            extra={"username": username, "item": item, "price": price},
        )

    async def _buy(self, username: str, item: str) -> int:
        price = check_price(item, await self.catalog.get_price(item))
        account = check_purchase(
            username,
            await self.accounts.get_by_username(username, for_update=True),
            price,
        )

        if not await self.accounts.debit(account.id, price):
            raise InsufficientCoinsError(account.coins, price)
        await self.inventory.add_item(account.id, item)
        return price
