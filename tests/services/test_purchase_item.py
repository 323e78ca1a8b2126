"""Purchase Workflow - catalog lookup, debit, inventory upsert, rollback.

Tests cover:
    - Buying debits exactly the price and adds one unit
    - Repeat purchase increments the same inventory row
    - Rejections (blank name, unknown item, unknown account, low balance)
      leave balance and inventory untouched
    - Purchases write no ledger entries
    - Inventory failure rolls back the debit
"""

import pytest
from sqlalchemy.exc import IntegrityError

from coinshop.core.errors import (
    AccountNotFoundError, DatabaseError, InsufficientCoinsError,
    ItemNotFoundError, ItemRequiredError,
)
from coinshop.services.purchase_item import PurchaseWorkflow
from coinshop.services.sql_stores import (
    SqlAccountStore, SqlCatalog, SqlInventoryStore,
)


async def test_buy_hoody_debits_price_and_adds_item(
    purchase, make_account, balance_of, inventory_of,
):
    await make_account("alice", 1000)

    await purchase.buy_item("alice", "hoody")

    assert await balance_of("alice") == 700
    assert await inventory_of("alice") == {"hoody": 1}


async def test_repeat_purchase_increments_quantity(
    purchase, make_account, balance_of, inventory_of,
):
    await make_account("alice", 1000)

    await purchase.buy_item("alice", "cup")
    await purchase.buy_item("alice", "cup")
    await purchase.buy_item("alice", "pen")

    assert await balance_of("alice") == 1000 - 20 - 20 - 10
    assert await inventory_of("alice") == {"cup": 2, "pen": 1}


async def test_purchase_writes_no_ledger_entry(purchase, make_account, ledger_rows):
    await make_account("alice", 1000)

    await purchase.buy_item("alice", "book")

    assert await ledger_rows() == []


async def test_padded_item_name_is_not_a_catalog_item(
    purchase, make_account, balance_of, inventory_of,
):
    await make_account("alice", 1000)

    with pytest.raises(ItemNotFoundError):
        await purchase.buy_item("alice", " hoody")

    assert await balance_of("alice") == 1000
    assert await inventory_of("alice") == {}


@pytest.mark.parametrize("item_name", ["", "   "])
async def test_blank_item_name_is_rejected(
    purchase, make_account, balance_of, item_name,
):
    await make_account("alice", 1000)

    with pytest.raises(ItemRequiredError):
        await purchase.buy_item("alice", item_name)

    assert await balance_of("alice") == 1000


async def test_unknown_item_is_rejected(
    purchase, make_account, balance_of, inventory_of,
):
    await make_account("alice", 1000)

    with pytest.raises(ItemNotFoundError):
        await purchase.buy_item("alice", "yacht")

    assert await balance_of("alice") == 1000
    assert await inventory_of("alice") == {}


async def test_unknown_item_checked_before_account(purchase):
    with pytest.raises(ItemNotFoundError):
        await purchase.buy_item("ghost", "yacht")


async def test_unknown_account_is_rejected(purchase):
    with pytest.raises(AccountNotFoundError):
        await purchase.buy_item("ghost", "pen")


async def test_insufficient_coins_is_rejected(
    purchase, make_account, balance_of, inventory_of,
):
    await make_account("alice", 499)

    with pytest.raises(InsufficientCoinsError) as exc_info:
        await purchase.buy_item("alice", "pink-hoody")

    assert exc_info.value.price == 500
    assert await balance_of("alice") == 499
    assert await inventory_of("alice") == {}


async def test_exact_balance_buys_item(purchase, make_account, balance_of):
    await make_account("alice", 10)

    await purchase.buy_item("alice", "pen")

    assert await balance_of("alice") == 0


async def test_charlie_cannot_buy_pen_after_sending_half(
    purchase, transfer, make_account, balance_of,
):
    await make_account("charlie", 10)
    await make_account("alice", 1000)

    await transfer.send_coins("charlie", "alice", 5)
    with pytest.raises(InsufficientCoinsError):
        await purchase.buy_item("charlie", "pen")

    assert await balance_of("charlie") == 5


class _FailingInventory(SqlInventoryStore):
    async def add_item(self, account_id, item_type, quantity=1):
        raise IntegrityError("INSERT INTO inventory", {}, Exception("unique"))


async def test_inventory_failure_rolls_back_debit(
    test_db, make_account, balance_of, inventory_of,
):
    await make_account("alice", 1000)
    workflow = PurchaseWorkflow(
        SqlAccountStore(test_db), _FailingInventory(test_db),
        SqlCatalog(test_db), test_db,
    )

    with pytest.raises(DatabaseError):
        await workflow.buy_item("alice", "hoody")

    assert await balance_of("alice") == 1000
    assert await inventory_of("alice") == {}


async def test_rejected_purchase_retried_with_valid_item_succeeds(
    purchase, make_account, balance_of, inventory_of,
):
    await make_account("alice", 100)

    with pytest.raises(ItemNotFoundError):
        await purchase.buy_item("alice", "hoodie")
    await purchase.buy_item("alice", "wallet")

    assert await balance_of("alice") == 50
    assert await inventory_of("alice") == {"wallet": 1}
