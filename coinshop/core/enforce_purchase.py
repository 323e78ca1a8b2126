"""Purchase Rules - pure validation for buying a catalog item.

Invariants:
    - Check order: item name present, item in catalog, account exists,
      balance >= price
    - Item names are looked up exactly as given; surrounding whitespace is
      never trimmed, so " hoody" is not "hoody"
"""

from coinshop.core.domain_types import AccountSnapshot
from coinshop.core.errors import (
    AccountNotFoundError, InsufficientCoinsError, ItemNotFoundError,
    ItemRequiredError,
)


def require_item_name(item_name: str | None) -> str:
    """Rule 1: a non-blank item name is required. Returns it unchanged."""
    if not item_name or not item_name.strip():
        raise ItemRequiredError()
    return item_name


def check_price(item_name: str, price: int | None) -> int:
    """Rule 2: the item must be listed in the catalog."""
    if price is None:
        raise ItemNotFoundError(item_name)
    return price


def check_purchase(
    username: str, account: AccountSnapshot | None, price: int,
) -> AccountSnapshot:
    """Rules 3-4. Returns the buyer once the purchase is affordable."""
    if account is None:
        raise AccountNotFoundError(username)
    if account.coins < price:
        raise InsufficientCoinsError(account.coins, price)
    return account
