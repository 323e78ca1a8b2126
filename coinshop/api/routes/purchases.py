"""Purchase Route - POST /api/buy/{item_name}: buy one catalog item.

Invariants:
    - Every business rejection (including unknown item/account) is 400
    - POST /api/buy/ with no item name reaches the workflow and yields ITEM_REQUIRED
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from coinshop.api.dependencies import CurrentUsername, get_purchase_workflow
from coinshop.api.error_handlers import business_lookup
from coinshop.services.purchase_item import PurchaseWorkflow

router = APIRouter(prefix="/api", tags=["wallet"])

Workflow = Annotated[PurchaseWorkflow, Depends(get_purchase_workflow)]


@router.post("/buy/{item_name}")
async def buy_item(item_name: str, username: CurrentUsername, workflow: Workflow):
    with business_lookup():
        await workflow.buy_item(username, item_name)
    return {"status": "ok"}


@router.post("/buy/", include_in_schema=False)
async def buy_without_item(username: CurrentUsername, workflow: Workflow):
    with business_lookup():
        await workflow.buy_item(username, "")
    return {"status": "ok"}
