"""Boundary Protocols - contracts between core workflows and the storage shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All store IO is reached through these Protocol types
    - Every store method runs in the caller's open transaction; stores never
      commit or roll back on their own (Transactional owns that)

Design Decisions:
    - Protocol over ABC: structural subtyping; AsyncSession satisfies
      Transactional without an adapter
    - debit is guarded: returns False instead of letting a balance go negative
"""

from typing import Protocol

from coinshop.core.domain_types import (
    AccountId, AccountSnapshot, InventoryLine, LedgerEntryId, TransferLine,
)


class Transactional(Protocol):
    """Commit/rollback handle for one unit of work."""
    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...


class AccountStore(Protocol):
    """Contract for account persistence."""
    async def get_by_username(
        self, username: str, for_update: bool = False,
    ) -> AccountSnapshot | None: ...
    async def create(
        self, username: str, password_hash: str, coins: int,
    ) -> AccountSnapshot: ...
    async def debit(self, account_id: AccountId, amount: int) -> bool: ...
    async def credit(self, account_id: AccountId, amount: int) -> None: ...


class InventoryStore(Protocol):
    """Contract for per-account item quantities."""
    async def add_item(
        self, account_id: AccountId, item_type: str, quantity: int = 1,
    ) -> None: ...
    async def list_for_account(
        self, account_id: AccountId,
    ) -> list[InventoryLine]: ...


class TransactionLedger(Protocol):
    """Contract for the append-only transfer ledger."""
    async def record(
        self, sender_id: AccountId, receiver_id: AccountId, amount: int,
    ) -> LedgerEntryId: ...
    async def received_by(self, account_id: AccountId) -> list[TransferLine]: ...
    async def sent_by(self, account_id: AccountId) -> list[TransferLine]: ...


class Catalog(Protocol):
    """Contract for item price lookup."""
    async def get_price(self, item_name: str) -> int | None: ...
