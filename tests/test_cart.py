import uuid

import pytest

from storefront.data.models import ProductModel


def test_get_cart_creates_empty_cart(client, auth_headers):
    res = client.get("/cart", headers=auth_headers)

    assert res.status_code == 200
    body = res.json()
    assert body["items"] == []
    assert body["subtotalCents"] == 0
    assert body["currencyCode"] == "USD"

    assert client.get("/cart", headers=auth_headers).json()["id"] == body["id"]


def test_add_item_and_read_cart(client, make_product, auth_headers):
    product_id = make_product(price_cents=1250, name="Keyboard")

    res = client.post("/cart/items", json={"productId": str(product_id), "quantity": 2}, headers=auth_headers)

    assert res.status_code == 201
    assert res.json()["quantity"] == 2
    assert res.json()["productId"] == str(product_id)

    cart = client.get("/cart", headers=auth_headers).json()
    assert len(cart["items"]) == 1
    item = cart["items"][0]
    assert item["unitPriceCents"] == 1250
    assert item["lineTotalCents"] == 2500
    assert item["product"]["name"] == "Keyboard"
    assert cart["subtotalCents"] == 2500


def test_adding_same_product_increments_quantity(client, make_product, auth_headers):
    product_id = str(make_product())
    first = client.post("/cart/items", json={"productId": product_id, "quantity": 1}, headers=auth_headers).json()

    second = client.post("/cart/items", json={"productId": product_id, "quantity": 3}, headers=auth_headers).json()

    assert second["id"] == first["id"]
    assert second["quantity"] == 4
    assert len(client.get("/cart", headers=auth_headers).json()["items"]) == 1


def test_increment_keeps_original_price(client, database, make_product, auth_headers):
    product_id = make_product(price_cents=500)
    client.post("/cart/items", json={"productId": str(product_id), "quantity": 1}, headers=auth_headers)
    with database.transaction() as session:
        session.get(ProductModel, product_id).price_cents = 800

    client.post("/cart/items", json={"productId": str(product_id), "quantity": 1}, headers=auth_headers)

    item = client.get("/cart", headers=auth_headers).json()["items"][0]
    assert item["unitPriceCents"] == 500
    assert item["quantity"] == 2


def test_add_unknown_or_inactive_product(client, make_product, auth_headers):
    res = client.post("/cart/items", json={"productId": str(uuid.uuid4()), "quantity": 1}, headers=auth_headers)
    assert res.status_code == 404
    assert res.json() == {"message": "Product not found"}

    inactive = make_product(is_active=False)
    res = client.post("/cart/items", json={"productId": str(inactive), "quantity": 1}, headers=auth_headers)
    assert res.status_code == 404


def test_add_item_validation(client, make_product, auth_headers):
    res = client.post("/cart/items", json={"productId": str(make_product()), "quantity": 0}, headers=auth_headers)

    assert res.status_code == 400
    body = res.json()
    assert body["message"] == "Validation error"
    assert body["errors"][0]["path"] == "quantity"


def test_currency_mismatch_is_rejected(client, make_product, auth_headers):
    usd = make_product(currency_code="USD")
    eur = make_product(currency_code="EUR")
    client.post("/cart/items", json={"productId": str(usd), "quantity": 1}, headers=auth_headers)

    res = client.post("/cart/items", json={"productId": str(eur), "quantity": 1}, headers=auth_headers)

    assert res.status_code == 409
    assert res.json() == {"message": "Cart already contains items in a different currency"}


def test_update_item_quantity(client, make_product, auth_headers):
    item = client.post(
        "/cart/items", json={"productId": str(make_product()), "quantity": 1}, headers=auth_headers
    ).json()

    res = client.patch(f"/cart/items/{item['id']}", json={"quantity": 5}, headers=auth_headers)

    assert res.status_code == 200
    assert res.json()["quantity"] == 5
    assert client.get("/cart", headers=auth_headers).json()["items"][0]["quantity"] == 5


def test_update_missing_item(client, auth_headers):
    res = client.patch(f"/cart/items/{uuid.uuid4()}", json={"quantity": 2}, headers=auth_headers)
    assert res.status_code == 404
    assert res.json() == {"message": "Cart not found"}

    client.get("/cart", headers=auth_headers)
    res = client.patch(f"/cart/items/{uuid.uuid4()}", json={"quantity": 2}, headers=auth_headers)
    assert res.status_code == 404
    assert res.json() == {"message": "Cart item not found"}


def test_remove_item(client, make_product, auth_headers):
    item = client.post(
        "/cart/items", json={"productId": str(make_product()), "quantity": 1}, headers=auth_headers
    ).json()

    res = client.delete(f"/cart/items/{item['id']}", headers=auth_headers)

    assert res.status_code == 204
    assert client.get("/cart", headers=auth_headers).json()["items"] == []
    assert client.delete(f"/cart/items/{item['id']}", headers=auth_headers).status_code == 404


def test_cannot_touch_other_users_items(client, make_product, register, auth_headers):
    item = client.post(
        "/cart/items", json={"productId": str(make_product()), "quantity": 1}, headers=auth_headers
    ).json()
    other = register(email="ola@example.com", name="Ola")
    other_headers = {"Authorization": f"Bearer {other['token']}"}
    client.get("/cart", headers=other_headers)

    res = client.delete(f"/cart/items/{item['id']}", headers=other_headers)

    assert res.status_code == 404
    assert len(client.get("/cart", headers=auth_headers).json()["items"]) == 1


def test_cart_requires_auth(client):
    assert client.get("/cart").status_code == 401
    res = client.get("/cart", headers={"Authorization": "Bearer nope"})
    assert res.status_code == 401
    assert res.json() == {"message": "Invalid or expired token"}


def test_service_rejects_non_positive_quantity(database, register):
    from storefront.domain.errors import BadRequest
    from storefront.services.cart_service import CartService

    user_id = uuid.UUID(register()["id"])
    service = CartService(database)

    with pytest.raises(BadRequest) as exc:
        service.add_item(user_id, uuid.uuid4(), 0)
    assert exc.value.status_code == 400
    assert exc.value.message == "Quantity must be greater than 0"

    with pytest.raises(BadRequest):
        service.update_item(user_id, uuid.uuid4(), -1)
