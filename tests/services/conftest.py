"""Service test fixtures - workflows wired to the per-test SQLite session.

Invariants:
    - Workflows under test use test_db for both stores and the transaction handle
    - Assertions read committed state through separate sessions (root conftest)
"""

import pytest

from coinshop.infrastructure.security import TokenCodec
from coinshop.services.account_summary import AccountSummaryQuery
from coinshop.services.identity import IdentityService
from coinshop.services.purchase_item import PurchaseWorkflow
from coinshop.services.sql_stores import (
    SqlAccountStore, SqlCatalog, SqlInventoryStore, SqlTransactionLedger,
)
from coinshop.services.transfer_coins import TransferWorkflow


@pytest.fixture
def transfer(test_db) -> TransferWorkflow:
    return TransferWorkflow(
        SqlAccountStore(test_db), SqlTransactionLedger(test_db), test_db,
    )


@pytest.fixture
def purchase(test_db) -> PurchaseWorkflow:
    return PurchaseWorkflow(
        SqlAccountStore(test_db), SqlInventoryStore(test_db),
        SqlCatalog(test_db), test_db,
    )


@pytest.fixture
def summary(test_db) -> AccountSummaryQuery:
    return AccountSummaryQuery(
        SqlAccountStore(test_db), SqlInventoryStore(test_db),
        SqlTransactionLedger(test_db),
    )


@pytest.fixture
def codec() -> TokenCodec:
    return TokenCodec("service-test-secret")


@pytest.fixture
def identity(test_db, codec) -> IdentityService:
    return IdentityService(SqlAccountStore(test_db), test_db, codec, 1000)
