import uuid


def test_list_products_only_active(client, make_product):
    active = make_product(name="Keyboard")
    make_product(name="Old keyboard", is_active=False)

    res = client.get("/products")

    assert res.status_code == 200
    assert [p["id"] for p in res.json()] == [str(active)]


def test_search_and_category_filter(client, make_product):
    make_product(name="Mechanical Keyboard", category_slug="keyboards", stock=5)
    make_product(name="Monitor", category_slug="displays")

    found = client.get("/products", params={"q": "keyboard"}).json()
    assert [p["name"] for p in found] == ["Mechanical Keyboard"]
    assert found[0]["categorySlug"] == "keyboards"
    assert found[0]["inventory"] == {"quantity": 5, "reserved": 0}

    displays = client.get("/products", params={"category": "displays"}).json()
    assert [p["name"] for p in displays] == ["Monitor"]
    assert displays[0]["inventory"] is None


def test_get_product(client, make_product):
    product_id = make_product(price_cents=4950, name="Mouse")

    res = client.get(f"/products/{product_id}")

    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "Mouse"
    assert body["priceCents"] == 4950
    assert body["currencyCode"] == "USD"


def test_get_missing_product(client):
    res = client.get(f"/products/{uuid.uuid4()}")

    assert res.status_code == 404
    assert res.json() == {"message": "Product not found"}


def test_list_categories_ordered_by_name(client, make_product):
    make_product(category_slug="mice")
    make_product(category_slug="displays")

    names = [c["name"] for c in client.get("/categories").json()]

    assert names == ["Displays", "Mice"]
