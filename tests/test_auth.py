import bcrypt
from jose import jwt

from storefront.utils.security import hash_password, sign_access_token, verify_password
from storefront.utils.settings import JWT_ALGORITHM, JWT_SECRET


def test_register_returns_token_and_user(client):
    res = client.post(
        "/auth/register",
        json={"name": "Jan Kowalski", "email": "Jan@Example.com", "password": "secret123"},
    )

    assert res.status_code == 201
    body = res.json()
    assert body["user"]["email"] == "jan@example.com"
    assert body["user"]["name"] == "Jan Kowalski"

    claims = jwt.decode(body["token"], JWT_SECRET, algorithms=[JWT_ALGORITHM])
    assert claims["sub"] == body["user"]["id"]


def test_register_duplicate_email(client, register):
    register(email="jan@example.com")

    res = client.post(
        "/auth/register",
        json={"name": "Jan", "email": "jan@example.com", "password": "secret123"},
    )

    assert res.status_code == 409
    assert res.json() == {"message": "Email already registered"}


def test_register_validation(client):
    res = client.post("/auth/register", json={"name": "Jan", "email": "not-an-email", "password": "123"})

    assert res.status_code == 400
    paths = {e["path"] for e in res.json()["errors"]}
    assert paths == {"email", "password"}


def test_login(client, register):
    register(email="jan@example.com", password="secret123")

    res = client.post("/auth/login", json={"email": "jan@example.com", "password": "secret123"})

    assert res.status_code == 200
    assert res.json()["user"]["email"] == "jan@example.com"
    assert res.json()["token"]


def test_login_wrong_password(client, register):
    register(email="jan@example.com", password="secret123")

    res = client.post("/auth/login", json={"email": "jan@example.com", "password": "wrong-one"})

    assert res.status_code == 401
    assert res.json() == {"message": "Invalid credentials"}


def test_login_unknown_email(client):
    res = client.post("/auth/login", json={"email": "nobody@example.com", "password": "secret123"})
    assert res.status_code == 401


def test_me(client, auth_headers):
    res = client.get("/auth/me", headers=auth_headers)

    assert res.status_code == 200
    assert res.json()["email"] == "jan@example.com"
    assert res.json()["isAdmin"] is False


def test_me_admin_flag(client, admin_headers):
    assert client.get("/auth/me", headers=admin_headers).json()["isAdmin"] is True


def test_me_without_token(client):
    res = client.get("/auth/me")

    assert res.status_code == 401
    assert res.json() == {"message": "Missing Authorization Bearer token"}


def test_me_with_expired_token(client, register):
    user = register()
    token = sign_access_token({"sub": user["id"]}, expires_minutes=-1)

    res = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert res.status_code == 401
    assert res.json() == {"message": "Invalid or expired token"}


def test_me_for_deleted_user(client):
    token = sign_access_token({"sub": "00000000-0000-0000-0000-000000000000"})

    res = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert res.status_code == 401
    assert res.json() == {"message": "User not found"}


def test_inactive_user_is_forbidden(client, database, register):
    from storefront.repos.user_repo import UserRepo

    user = register(email="jan@example.com", password="secret123")
    with database.transaction() as session:
        UserRepo(session).get_user_by_email("jan@example.com").is_active = False

    res = client.get("/auth/me", headers={"Authorization": f"Bearer {user['token']}"})
    assert res.status_code == 403
    assert res.json() == {"message": "User is inactive"}

    res = client.post("/auth/login", json={"email": "jan@example.com", "password": "secret123"})
    assert res.status_code == 403


def test_password_hashing():
    hashed = hash_password("secret123")

    assert hashed.startswith("$2b$10$")
    assert hashed != hash_password("secret123")
    assert verify_password("secret123", hashed)
    assert not verify_password("secret124", hashed)
    assert not verify_password("secret123", "garbage")


def test_existing_2a_bcrypt_hash_is_accepted():
    legacy = bcrypt.hashpw(b"secret123", bcrypt.gensalt(rounds=10, prefix=b"2a")).decode("utf-8")

    assert legacy.startswith("$2a$10$")
    assert verify_password("secret123", legacy)
    assert not verify_password("wrong", legacy)


def test_login_with_imported_bcrypt_hash(client, database, register):
    from storefront.repos.user_repo import UserRepo

    register(email="jan@example.com", password="secret123")
    with database.transaction() as session:
        user = UserRepo(session).get_user_by_email("jan@example.com")
        user.password_hash = bcrypt.hashpw(b"old-password", bcrypt.gensalt(rounds=10, prefix=b"2a")).decode("utf-8")

    res = client.post("/auth/login", json={"email": "jan@example.com", "password": "old-password"})

    assert res.status_code == 200
