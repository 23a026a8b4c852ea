def test_health(client):
    res = client.get("/")

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["message"] == "Service is healthy"
    assert body["environment"]
    assert body["timestamp"]


def test_unknown_route(client):
    assert client.get("/nope").status_code == 404


def test_cors_wildcard_does_not_allow_credentials(client):
    res = client.get("/", headers={"Origin": "https://shop.example.com"})

    assert res.headers["access-control-allow-origin"] == "*"
    assert "access-control-allow-credentials" not in res.headers
