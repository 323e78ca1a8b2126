"""Transfer Workflow - send coins from one account to another with a ledger record.

Invariants:
    - Validation order is fixed (see core/enforce_transfer.py); the amount is
      checked before any store access
    - Debit, credit and ledger insert commit together or not at all
    - sender.coins + receiver.coins is unchanged by a committed transfer
    - Both rows are read FOR UPDATE in username order, so two opposite
      transfers between the same pair lock in the same order
    - A guarded debit that matches no row raises InsufficientFundsError and
      rolls the unit back (balance dropped after the read)

Design Decisions:
    - Stores and the transaction handle are constructor arguments; the route
      layer wires the SQL implementations per request
"""

import logging

from coinshop.core.enforce_transfer import check_amount, check_transfer
from coinshop.core.errors import CoinShopError, ErrorKind, InsufficientFundsError
from coinshop.core.repository_protocols import (
    AccountStore, TransactionLedger, Transactional,
)
from coinshop.services.atomic_unit import atomic

logger = logging.getLogger(__name__)


class TransferWorkflow:
    """Validated, atomic peer-to-peer coin transfer."""

    def __init__(
        self, accounts: AccountStore, ledger: TransactionLedger,
        tx: Transactional,
    ):
        self.accounts = accounts
        self.ledger = ledger
        self.tx = tx

    async def send_coins(
        self, sender_username: str, receiver_username: str, amount: int,
    ) -> None:
        """Move amount coins from sender to receiver and record it in the ledger."""
        logger.debug(
            f"send_coins {sender_username} -> {receiver_username}",
            extra={
                "username": sender_username, "receiver": receiver_username,
                "amount": amount,
            },
        )
        try:
            amount = check_amount(amount)
            async with atomic(self.tx, "send_coins"):
                await self._transfer(sender_username, receiver_username, amount)
        except CoinShopError as e:
            if e.kind is not ErrorKind.INTERNAL:
                logger.warning(
                    f"Transfer rejected: {e.message}",
                    extra={
                        "username": sender_username,
                        "receiver": receiver_username,
                        "amount": amount, "error_code": e.code,
                    },
                )
            raise
        logger.info(
            f"Transferred {amount} coins",
            extra={
                "username": sender_username, "receiver": receiver_username,
                "amount": amount,
            },
        )

    async def _transfer(
        self, sender_username: str, receiver_username: str, amount: int,
    ) -> None:
        found = {}
        for username in sorted({sender_username, receiver_username}):
            found[username] = await self.accounts.get_by_username(
                username, for_update=True,
            )
        sender, receiver = check_transfer(
            sender_username, receiver_username,
            found[sender_username], found[receiver_username], amount,
        )

        if not await self.accounts.debit(sender.id, amount):
            raise InsufficientFundsError(sender.coins, amount)
        await self.accounts.credit(receiver.id, amount)
        await self.ledger.record(sender.id, receiver.id, amount)
