"""Request Dependencies - per-request wiring of stores into workflows, plus auth.

Invariants:
    - Every workflow built for a request shares that request's AsyncSession
    - get_current_username is the only place the Authorization header is read
"""

from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from coinshop.config import Settings, get_settings
from coinshop.infrastructure.database import get_db
from coinshop.infrastructure.security import TokenCodec
from coinshop.services.account_summary import AccountSummaryQuery
from coinshop.services.identity import IdentityService, verify_bearer_token
from coinshop.services.purchase_item import PurchaseWorkflow
from coinshop.services.sql_stores import (
    SqlAccountStore, SqlCatalog, SqlInventoryStore, SqlTransactionLedger,
)
from coinshop.services.transfer_coins import TransferWorkflow

DbSession = Annotated[AsyncSession, Depends(get_db)]


def get_token_codec(
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenCodec:
    return TokenCodec(
        settings.jwt_secret_key,
        settings.jwt_algorithm,
        settings.access_token_expire_minutes,
    )


def get_current_username(
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
    authorization: Annotated[str | None, Header()] = None,
) -> str:
    return verify_bearer_token(authorization, codec)


def get_identity_service(
    db: DbSession,
    codec: Annotated[TokenCodec, Depends(get_token_codec)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> IdentityService:
    return IdentityService(
        SqlAccountStore(db), db, codec, settings.starting_coins,
    )


def get_transfer_workflow(db: DbSession) -> TransferWorkflow:
    return TransferWorkflow(SqlAccountStore(db), SqlTransactionLedger(db), db)


def get_purchase_workflow(db: DbSession) -> PurchaseWorkflow:
    return PurchaseWorkflow(
        SqlAccountStore(db), SqlInventoryStore(db), SqlCatalog(db), db,
    )


def get_account_summary_query(db: DbSession) -> AccountSummaryQuery:
    return AccountSummaryQuery(
        SqlAccountStore(db), SqlInventoryStore(db), SqlTransactionLedger(db),
    )


CurrentUsername = Annotated[str, Depends(get_current_username)]
