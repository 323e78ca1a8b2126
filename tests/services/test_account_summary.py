"""Account Summary - composed read of balance, inventory and directional history."""

import pytest

from coinshop.core.domain_types import HistoryDirection, InventoryLine
from coinshop.core.errors import AccountNotFoundError


async def test_summary_of_fresh_account_is_empty(summary, make_account):
    await make_account("alice", 1000)

    result = await summary.get_account_summary("alice")

    assert result.coins == 1000
    assert result.inventory == []
    assert result.history.received == []
    assert result.history.sent == []


async def test_transfer_shows_in_both_histories(summary, transfer, make_account):
    await make_account("alice", 1000)
    await make_account("bob", 1000)
    await transfer.send_coins("alice", "bob", 50)

    alice = await summary.get_account_summary("alice")
    bob = await summary.get_account_summary("bob")

    assert alice.coins == 950
    assert [(t.counterparty, t.amount) for t in alice.history.sent] == [("bob", 50)]
    assert alice.history.received == []
    assert bob.coins == 1050
    assert [(t.counterparty, t.amount) for t in bob.history.received] == [("alice", 50)]
    assert bob.history.received[0].direction is HistoryDirection.RECEIVED


async def test_history_is_newest_first(summary, transfer, make_account):
    await make_account("alice", 1000)
    await make_account("bob", 1000)
    await make_account("carol", 1000)
    await transfer.send_coins("alice", "bob", 1)
    await transfer.send_coins("carol", "bob", 2)
    await transfer.send_coins("alice", "bob", 3)

    bob = await summary.get_account_summary("bob")

    assert [(t.counterparty, t.amount) for t in bob.history.received] == [
        ("alice", 3), ("carol", 2), ("alice", 1),
    ]


async def test_inventory_lists_purchases_by_item_name(
    summary, purchase, make_account,
):
    await make_account("alice", 1000)
    await purchase.buy_item("alice", "umbrella")
    await purchase.buy_item("alice", "cup")
    await purchase.buy_item("alice", "cup")

    result = await summary.get_account_summary("alice")

    assert result.inventory == [
        InventoryLine("cup", 2), InventoryLine("umbrella", 1),
    ]
    assert result.coins == 1000 - 200 - 40


async def test_unknown_account_raises(summary):
    with pytest.raises(AccountNotFoundError):
        await summary.get_account_summary("ghost")
