"""Wallet Schemas - send-coin request and the info response.

Invariants:
    - SendCoinRequest.amount is a strict JSON integer (no bool, string or
      float coercion); sign is checked by the workflow so the
      client gets the workflow's error message for non-positive amounts
    - InfoResponse mirrors AccountSummary; from_summary is the only mapping
"""

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from coinshop.core.domain_types import AccountSummary


class SendCoinRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    to_user: str = Field(alias="toUser", max_length=255)
    amount: StrictInt


class InventoryItemOut(BaseModel):
    type: str
    quantity: int


class ReceivedTransferOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_user: str = Field(alias="fromUser")
    amount: int


class SentTransferOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    to_user: str = Field(alias="toUser")
    amount: int


class CoinHistoryOut(BaseModel):
    received: list[ReceivedTransferOut]
    sent: list[SentTransferOut]


class InfoResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    coins: int
    inventory: list[InventoryItemOut]
    coin_history: CoinHistoryOut = Field(alias="coinHistory")

    @classmethod
    def from_summary(cls, summary: AccountSummary) -> "InfoResponse":
        return cls(
            coins=summary.coins,
            inventory=[
                InventoryItemOut(type=line.item_type, quantity=line.quantity)
                for line in summary.inventory
            ],
            coin_history=CoinHistoryOut(
                received=[
                    ReceivedTransferOut(
                        from_user=line.counterparty, amount=line.amount,
                    )
                    for line in summary.history.received
                ],
                sent=[
                    SentTransferOut(to_user=line.counterparty, amount=line.amount)
                    for line in summary.history.sent
                ],
            ),
        )
