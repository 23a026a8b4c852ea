# storefront/data/seed.py
from sqlalchemy import select

from storefront.data.database import Database
from storefront.data.models import CategoryModel, InventoryModel, ProductModel, RoleModel
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

ROLES = ("customer", "admin")

DEMO_CATEGORIES = [
    {"name": "Keyboards", "slug": "keyboards", "description": "Mechanical and membrane keyboards"},
    {"name": "Displays", "slug": "displays", "description": "Monitors and accessories"},
]

DEMO_PRODUCTS = [
    {"category": "keyboards", "name": "Keyboard", "slug": "keyboard", "sku": "KB-001", "price_cents": 19999, "stock": 25},
    {"category": "keyboards", "name": "Mouse", "slug": "mouse", "sku": "MS-001", "price_cents": 4950, "stock": 80},
    {"category": "displays", "name": "Monitor", "slug": "monitor", "sku": "MN-001", "price_cents": 89900, "stock": 7},
]


def seed_roles(database: Database) -> None:
    with database.transaction() as session:
        existing = set(session.execute(select(RoleModel.name)).scalars().all())
        for name in ROLES:
            if name not in existing:
                session.add(RoleModel(name=name))
                logger.info(f"Seeded role '{name}'")


def seed_demo_catalog(database: Database) -> None:
    with database.transaction() as session:
        # not forcing: only seed if empty
        if session.execute(select(ProductModel.id).limit(1)).first():
            return

        categories = {}
        for data in DEMO_CATEGORIES:
            category = CategoryModel(**data)
            session.add(category)
            categories[data["slug"]] = category
        session.flush()

        for data in DEMO_PRODUCTS:
            product = ProductModel(
                category_id=categories[data["category"]].id,
                name=data["name"],
                slug=data["slug"],
                sku=data["sku"],
                price_cents=data["price_cents"],
                currency_code="USD",
                is_active=True,
            )
            session.add(product)
            session.flush()
            session.add(InventoryModel(product_id=product.id, quantity=data["stock"], reserved=0))

        logger.info(f"Seeded {len(DEMO_PRODUCTS)} demo products")
