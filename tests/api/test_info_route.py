"""Info Route - balance, inventory and coin history of the token's user."""

from coinshop.infrastructure.security import TokenCodec


async def test_info_of_fresh_account(client, make_account, auth_header):
    await make_account("alice", 1000)

    res = await client.get("/api/info", headers=auth_header("alice"))

    assert res.status_code == 200
    assert res.json() == {
        "coins": 1000,
        "inventory": [],
        "coinHistory": {"received": [], "sent": []},
    }


async def test_info_uses_camel_case_wire_names(
    client, make_account, auth_header,
):
    await make_account("alice", 1000)
    await make_account("bob", 1000)
    await client.post(
        "/api/sendCoin", json={"toUser": "bob", "amount": 30},
        headers=auth_header("alice"),
    )
    await client.post("/api/buy/cup", headers=auth_header("bob"))

    alice = (await client.get("/api/info", headers=auth_header("alice"))).json()
    bob = (await client.get("/api/info", headers=auth_header("bob"))).json()

    assert alice["coins"] == 970
    assert alice["coinHistory"]["sent"] == [{"toUser": "bob", "amount": 30}]
    assert bob["coins"] == 1010
    assert bob["coinHistory"]["received"] == [{"fromUser": "alice", "amount": 30}]
    assert bob["inventory"] == [{"type": "cup", "quantity": 1}]


async def test_info_without_token_is_401(client):
    res = await client.get("/api/info")

    assert res.status_code == 401
    assert res.json()["code"] == "MISSING_TOKEN"


async def test_info_with_foreign_signature_is_401(client, make_account):
    await make_account("alice")
    forged = TokenCodec("some-other-secret").issue("alice")
    header = {"Authorization": f"Bearer {forged}"}

    res = await client.get("/api/info", headers=header)

    assert res.status_code == 401
    assert res.json()["code"] == "INVALID_TOKEN"


async def test_info_for_deleted_account_is_404(client, auth_header):
    res = await client.get("/api/info", headers=auth_header("ghost"))

    assert res.status_code == 404
    assert res.json()["code"] == "ACCOUNT_NOT_FOUND"
