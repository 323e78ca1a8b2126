"""Domain Types - identity types and read models shared by core and shell.

Invariants:
    - AccountId wraps the integer primary key; never use a bare int in workflows
    - Coins are whole integers; balances are >= 0 once committed
    - Read models are frozen: stores return snapshots, workflows never mutate them

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

AccountId = NewType("AccountId", int)
LedgerEntryId = NewType("LedgerEntryId", int)


# ─── Policy Constants ────────────────────────────────────────────

DEFAULT_STARTING_COINS: int = 1000


# ─── Enums ───────────────────────────────────────────────────────

class HistoryDirection(str, Enum):
    """Which side of a ledger entry an account is on."""
    RECEIVED = "received"
    SENT = "sent"


# ─── Read Models ─────────────────────────────────────────────────

@dataclass(frozen=True)
class AccountSnapshot:
    """Account row as read inside a unit of work."""
    id: AccountId
    username: str
    password_hash: str
    coins: int


@dataclass(frozen=True)
class InventoryLine:
    """Quantity of one item type held by an account."""
    item_type: str
    quantity: int


@dataclass(frozen=True)
class TransferLine:
    """One ledger entry seen from one account.

    counterparty is the sender for RECEIVED lines and the receiver for SENT lines.
    """
    counterparty: str
    amount: int
    direction: HistoryDirection


@dataclass(frozen=True)
class CoinHistory:
    received: list[TransferLine] = field(default_factory=list)
    sent: list[TransferLine] = field(default_factory=list)


@dataclass(frozen=True)
class AccountSummary:
    """Balance, inventory and coin history for one account."""
    coins: int
    inventory: list[InventoryLine]
    history: CoinHistory
