"""Info Route - GET /api/info: balance, inventory and coin history of the caller.

Invariants:
    - Unknown account is 404 here (identity-scoped), unlike the business routes
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from coinshop.api.dependencies import CurrentUsername, get_account_summary_query
from coinshop.schemas.wallet import InfoResponse
from coinshop.services.account_summary import AccountSummaryQuery

router = APIRouter(prefix="/api", tags=["wallet"])


@router.get("/info", response_model=InfoResponse)
async def get_info(
    username: CurrentUsername,
    query: Annotated[AccountSummaryQuery, Depends(get_account_summary_query)],
):
    summary = await query.get_account_summary(username)
    return InfoResponse.from_summary(summary)
