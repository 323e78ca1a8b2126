"""Transfer Rules - pure validation for coin transfers in the fixed check order.

Invariants:
    - Check order: amount > 0, sender exists, receiver exists, sender != receiver,
      sender balance >= amount. The first failing check decides the error.
    - Pure: no IO, no mutation; the workflow performs the lookups between
      check_amount and check_transfer
"""

from coinshop.core.domain_types import AccountSnapshot
from coinshop.core.errors import (
    InsufficientFundsError, InvalidAmountError, ReceiverNotFoundError,
    SelfTransferError, SenderNotFoundError,
)


def check_amount(amount: object) -> int:
    """Rule 1: amount must be a positive integer (bool is rejected)."""
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise InvalidAmountError(amount)
    return amount


def check_transfer(
    sender_username: str,
    receiver_username: str,
    sender: AccountSnapshot | None,
    receiver: AccountSnapshot | None,
    amount: int,
) -> tuple[AccountSnapshot, AccountSnapshot]:
    """Rules 2-5. Returns the (sender, receiver) pair once every rule passes."""
    if sender is None:
        raise SenderNotFoundError(sender_username)
    if receiver is None:
        raise ReceiverNotFoundError(receiver_username)
    if sender.id == receiver.id:
        raise SelfTransferError()
    if sender.coins < amount:
        raise InsufficientFundsError(sender.coins, amount)
    return sender, receiver
