"""Account Summary - balance, inventory and coin history for one account.

Invariants:
    - Read-only: no store mutation, no commit
    - History lists are newest first; received lines name the sender,
      sent lines name the receiver
"""

import logging

from coinshop.core.domain_types import AccountSummary, CoinHistory
from coinshop.core.errors import AccountNotFoundError
from coinshop.core.repository_protocols import (
    AccountStore, InventoryStore, TransactionLedger,
)

logger = logging.getLogger(__name__)


class AccountSummaryQuery:
    """Composes the info view from the three stores."""

    def __init__(
        self, accounts: AccountStore, inventory: InventoryStore,
        ledger: TransactionLedger,
    ):
        self.accounts = accounts
        self.inventory = inventory
        self.ledger = ledger

    async def get_account_summary(self, username: str) -> AccountSummary:
        account = await self.accounts.get_by_username(username)
        if account is None:
            logger.warning(
                "Summary requested for unknown account",
                extra={"username": username},
            )
            raise AccountNotFoundError(username)

        return AccountSummary(
            coins=account.coins,
            inventory=await self.inventory.list_for_account(account.id),
            history=CoinHistory(
                received=await self.ledger.received_by(account.id),
                sent=await self.ledger.sent_by(account.id),
            ),
        )
