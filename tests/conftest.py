"""Root conftest - test environment and shared in-memory database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the catalog seeded
    - Environment is set before any coinshop import reads Settings
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy import insert, select  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import coinshop.models  # noqa: E402,F401
from coinshop.core.catalog import catalog_rows  # noqa: E402
from coinshop.db.base import Base  # noqa: E402
from coinshop.models.account import Account  # noqa: E402
from coinshop.models.catalog_item import CatalogItem  # noqa: E402
from coinshop.models.inventory_entry import InventoryEntry  # noqa: E402
from coinshop.models.ledger_entry import LedgerEntry  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.execute(insert(CatalogItem), catalog_rows())
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def make_account(test_session_factory):
    """Insert an account directly; returns its id."""
    async def _make(
        username: str, coins: int = 1000, password_hash: str = "unused-hash",
    ) -> int:
        async with test_session_factory() as session:
            account = Account(
                username=username, password_hash=password_hash, coins=coins,
            )
            session.add(account)
            await session.commit()
            return account.id
    return _make


@pytest.fixture
def balance_of(test_session_factory):
    """Read an account's committed balance in a separate session."""
    async def _balance(username: str) -> int:
        async with test_session_factory() as session:
            result = await session.execute(
                select(Account.coins).where(Account.username == username),
            )
            return result.scalar_one()
    return _balance


@pytest.fixture
def ledger_rows(test_session_factory):
    """All committed ledger entries as (sender, receiver, amount) usernames."""
    async def _rows() -> list[tuple[str, str, int]]:
        async with test_session_factory() as session:
            accounts = {
                row.id: row.username
                for row in await session.execute(
                    select(Account.id, Account.username),
                )
            }
            result = await session.execute(
                select(LedgerEntry).order_by(LedgerEntry.id),
            )
            return [
                (
                    accounts[e.sender_account_id],
                    accounts[e.receiver_account_id],
                    e.amount,
                )
                for e in result.scalars()
            ]
    return _rows


@pytest.fixture
def inventory_of(test_session_factory):
    """Committed inventory of an account as {item_type: quantity}."""
    async def _inventory(username: str) -> dict[str, int]:
        async with test_session_factory() as session:
            result = await session.execute(
                select(InventoryEntry.item_type, InventoryEntry.quantity)
                .join(Account, Account.id == InventoryEntry.account_id)
                .where(Account.username == username),
            )
            return {row.item_type: row.quantity for row in result}
    return _inventory
