import uuid


def _place_order(client, make_product, headers, price_cents=500, quantity=1):
    client.post(
        "/cart/items",
        json={"productId": str(make_product(price_cents=price_cents)), "quantity": quantity},
        headers=headers,
    )
    res = client.post("/checkout", json={}, headers=headers)
    assert res.status_code == 201, res.text
    return res.json()


def test_list_orders(client, make_product, auth_headers):
    first = _place_order(client, make_product, auth_headers, price_cents=100)
    second = _place_order(client, make_product, auth_headers, price_cents=200)

    res = client.get("/orders", headers=auth_headers)

    assert res.status_code == 200
    assert {o["id"] for o in res.json()} == {first["id"], second["id"]}


def test_get_order_with_items(client, make_product, auth_headers):
    order = _place_order(client, make_product, auth_headers, price_cents=300, quantity=3)

    res = client.get(f"/orders/{order['id']}", headers=auth_headers)

    assert res.status_code == 200
    body = res.json()
    assert body["totalCents"] == 900
    assert len(body["items"]) == 1
    item = body["items"][0]
    assert item["quantity"] == 3
    assert item["unitPriceCents"] == 300
    assert item["lineTotalCents"] == 900


def test_orders_of_other_users_are_hidden(client, make_product, register, auth_headers):
    order = _place_order(client, make_product, auth_headers)
    other = register(email="ola@example.com", name="Ola")
    other_headers = {"Authorization": f"Bearer {other['token']}"}

    assert client.get("/orders", headers=other_headers).json() == []
    res = client.get(f"/orders/{order['id']}", headers=other_headers)
    assert res.status_code == 404
    assert res.json() == {"message": "Order not found"}


def test_missing_order(client, auth_headers):
    assert client.get(f"/orders/{uuid.uuid4()}", headers=auth_headers).status_code == 404
