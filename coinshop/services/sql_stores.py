"""SQL Stores - SQLAlchemy implementations of the core repository protocols.

Invariants:
    - All stores share the caller's AsyncSession, so every call joins the open
      transaction; stores flush but never commit
    - Reads select columns, not entities: snapshots never go stale in the
      identity map after Core UPDATE statements
    - Balance changes are relative UPDATEs (coins = coins +/- n); debit is
      guarded by coins >= n and reports whether a row matched
"""

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from coinshop.core.domain_types import (
    AccountId, AccountSnapshot, HistoryDirection, InventoryLine,
    LedgerEntryId, TransferLine,
)
from coinshop.core.errors import InternalError
from coinshop.models.account import Account
from coinshop.models.catalog_item import CatalogItem
from coinshop.models.inventory_entry import InventoryEntry
from coinshop.models.ledger_entry import LedgerEntry


class SqlAccountStore:
    """AccountStore over the accounts table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_username(
        self, username: str, for_update: bool = False,
    ) -> AccountSnapshot | None:
        query = select(
            Account.id, Account.username, Account.password_hash, Account.coins,
        ).where(Account.username == username)
        if for_update:
            query = query.with_for_update()
        row = (await self.db.execute(query)).one_or_none()
        if row is None:
            return None
        return AccountSnapshot(
            id=AccountId(row.id),
            username=row.username,
            password_hash=row.password_hash,
            coins=row.coins,
        )

    async def create(
        self, username: str, password_hash: str, coins: int,
    ) -> AccountSnapshot:
        account = Account(
            username=username, password_hash=password_hash, coins=coins,
        )
        self.db.add(account)
        await self.db.flush()
        return AccountSnapshot(
            id=AccountId(account.id),
            username=account.username,
            password_hash=account.password_hash,
            coins=account.coins,
        )

    async def debit(self, account_id: AccountId, amount: int) -> bool:
        """Subtract amount only if the balance covers it."""
        result = await self.db.execute(
            update(Account)
            .where(Account.id == account_id)
            .where(Account.coins >= amount)
            .values(coins=Account.coins - amount)
            .execution_options(synchronize_session=False),
        )
        return result.rowcount == 1

    async def credit(self, account_id: AccountId, amount: int) -> None:
        result = await self.db.execute(
            update(Account)
            .where(Account.id == account_id)
            .values(coins=Account.coins + amount)
            .execution_options(synchronize_session=False),
        )
        if result.rowcount != 1:
            raise InternalError(f"Account {account_id} vanished during credit")


class SqlInventoryStore:
    """InventoryStore over the inventory table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add_item(
        self, account_id: AccountId, item_type: str, quantity: int = 1,
    ) -> None:
        """Increment the (account, item) row, inserting it on first purchase."""
        result = await self.db.execute(
            update(InventoryEntry)
            .where(InventoryEntry.account_id == account_id)
            .where(InventoryEntry.item_type == item_type)
            .values(quantity=InventoryEntry.quantity + quantity)
            .execution_options(synchronize_session=False),
        )
        if result.rowcount == 0:
            await self.db.execute(
                insert(InventoryEntry).values(
                    account_id=account_id,
                    item_type=item_type,
                    quantity=quantity,
                ),
            )

    async def list_for_account(
        self, account_id: AccountId,
    ) -> list[InventoryLine]:
        result = await self.db.execute(
            select(InventoryEntry.item_type, InventoryEntry.quantity)
            .where(InventoryEntry.account_id == account_id)
            .order_by(InventoryEntry.item_type),
        )
        return [
            InventoryLine(item_type=row.item_type, quantity=row.quantity)
            for row in result
        ]


class SqlTransactionLedger:
    """TransactionLedger over the ledger_entries table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def record(
        self, sender_id: AccountId, receiver_id: AccountId, amount: int,
    ) -> LedgerEntryId:
        entry = LedgerEntry(
            sender_account_id=sender_id,
            receiver_account_id=receiver_id,
            amount=amount,
        )
        self.db.add(entry)
        await self.db.flush()
        return LedgerEntryId(entry.id)

    async def received_by(self, account_id: AccountId) -> list[TransferLine]:
        return await self._history(account_id, HistoryDirection.RECEIVED)

    async def sent_by(self, account_id: AccountId) -> list[TransferLine]:
        return await self._history(account_id, HistoryDirection.SENT)

    async def _history(
        self, account_id: AccountId, direction: HistoryDirection,
    ) -> list[TransferLine]:
        """Newest first; the counterparty is the other side of each entry."""
        if direction is HistoryDirection.RECEIVED:
            own_side = LedgerEntry.receiver_account_id
            other_side = LedgerEntry.sender_account_id
        else:
            own_side = LedgerEntry.sender_account_id
            other_side = LedgerEntry.receiver_account_id
        result = await self.db.execute(
            select(LedgerEntry.amount, Account.username)
            .join(Account, Account.id == other_side)
            .where(own_side == account_id)
            .order_by(LedgerEntry.created_at.desc(), LedgerEntry.id.desc()),
        )
        return [
            TransferLine(
                counterparty=row.username, amount=row.amount,
                direction=direction,
            )
            for row in result
        ]


class SqlCatalog:
    """Catalog over the catalog_items table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_price(self, item_name: str) -> int | None:
        result = await self.db.execute(
            select(CatalogItem.price).where(CatalogItem.item_name == item_name),
        )
        return result.scalar_one_or_none()
