import os

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DEMO_DATA"] = "false"

import pytest
from fastapi.testclient import TestClient

from storefront.data.database import Database
from storefront.data.models import CategoryModel, InventoryModel, ProductModel
from storefront.data.seed import seed_roles
from storefront.main import create_app
from storefront.repos.user_repo import UserRepo


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.create_all()
    seed_roles(db)
    yield db
    db.drop_all()
    db.dispose()


@pytest.fixture
def client(database):
    with TestClient(create_app(database=database)) as c:
        yield c


@pytest.fixture
def make_product(database):
    counter = {"n": 0}

    def _make(price_cents=500, currency_code="USD", is_active=True, name=None, category_slug=None, stock=None):
        counter["n"] += 1
        n = counter["n"]
        with database.transaction() as session:
            category_id = None
            if category_slug:
                category = session.query(CategoryModel).filter_by(slug=category_slug).one_or_none()
                if not category:
                    category = CategoryModel(name=category_slug.title(), slug=category_slug)
                    session.add(category)
                    session.flush()
                category_id = category.id

            product = ProductModel(
                category_id=category_id,
                name=name or f"Product {n}",
                slug=f"product-{n}",
                sku=f"SKU-{n}",
                price_cents=price_cents,
                currency_code=currency_code,
                is_active=is_active,
            )
            session.add(product)
            session.flush()
            if stock is not None:
                session.add(InventoryModel(product_id=product.id, quantity=stock, reserved=0))
            return product.id

    return _make


@pytest.fixture
def register(client):
    def _register(email="jan@example.com", password="secret123", name="Jan Kowalski"):
        res = client.post("/auth/register", json={"name": name, "email": email, "password": password})
        assert res.status_code == 201, res.text
        body = res.json()
        return {"id": body["user"]["id"], "token": body["token"]}

    return _register


@pytest.fixture
def auth_headers(register):
    user = register()
    return {"Authorization": f"Bearer {user['token']}"}


@pytest.fixture
def admin_headers(register, database):
    user = register(email="admin@example.com", name="Admin")
    with database.transaction() as session:
        repo = UserRepo(session)
        repo.assign_role(repo.get_user_by_email("admin@example.com"), "admin")
    return {"Authorization": f"Bearer {user['token']}"}
