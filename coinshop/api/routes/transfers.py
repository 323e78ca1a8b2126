"""Transfer Route - POST /api/sendCoin: send coins to another user.

Invariants:
    - Every business rejection (including unknown sender/receiver) is 400
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from coinshop.api.dependencies import CurrentUsername, get_transfer_workflow
from coinshop.api.error_handlers import business_lookup
from coinshop.schemas.wallet import SendCoinRequest
from coinshop.services.transfer_coins import TransferWorkflow

router = APIRouter(prefix="/api", tags=["wallet"])


@router.post("/sendCoin")
async def send_coin(
    body: SendCoinRequest,
    username: CurrentUsername,
    workflow: Annotated[TransferWorkflow, Depends(get_transfer_workflow)],
):
    with business_lookup():
        await workflow.send_coins(username, body.to_user, body.amount)
    return {"status": "ok"}
