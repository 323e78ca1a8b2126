"""Domain Types - identity wrappers and frozen read models."""

import dataclasses

import pytest

from coinshop.core.domain_types import (
    AccountId, AccountSnapshot, CoinHistory, HistoryDirection,
)


def test_account_id_wraps_int():
    assert AccountId(5) == 5


def test_history_direction_serializes_to_string():
    assert HistoryDirection.RECEIVED.value == "received"
    assert HistoryDirection.SENT == "sent"


def test_snapshot_is_frozen():
    snapshot = AccountSnapshot(AccountId(1), "alice", "hash", 10)
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.coins = 0


def test_empty_history_lists_are_independent():
    first, second = CoinHistory(), CoinHistory()
    assert first.received == [] and first.received is not second.received
