# storefront/services/catalog_service.py
import uuid
from typing import Any, Dict, List

from storefront.data.database import Database
from storefront.data.models.catalog import ProductModel
from storefront.domain.errors import NotFound
from storefront.repos.catalog_repo import CatalogRepo


def product_to_dict(p: ProductModel) -> Dict[str, Any]:
    return {
        "id": p.id,
        "category_id": p.category_id,
        "category_name": p.category.name if p.category else None,
        "category_slug": p.category.slug if p.category else None,
        "name": p.name,
        "slug": p.slug,
        "description": p.description,
        "price_cents": p.price_cents,
        "currency_code": p.currency_code,
        "sku": p.sku,
        "image_url": p.image_url,
        "is_active": p.is_active,
        "inventory": (
            {"quantity": p.inventory.quantity, "reserved": p.inventory.reserved}
            if p.inventory
            else None
        ),
    }


class CatalogService:
    def __init__(self, database: Database):
        self.database = database

    def list_categories(self) -> List[Dict[str, Any]]:
        with self.database.session() as session:
            return [
                {"id": c.id, "name": c.name, "slug": c.slug, "description": c.description}
                for c in CatalogRepo(session).list_categories()
            ]

    def list_products(self, q: str | None = None, category: str | None = None) -> List[Dict[str, Any]]:
        q = (q or "").strip() or None
        category = (category or "").strip() or None

        with self.database.session() as session:
            products = CatalogRepo(session).list_products(q=q, category_slug=category)
            return [product_to_dict(p) for p in products]

    def get_product(self, product_id: uuid.UUID) -> Dict[str, Any]:
        with self.database.session() as session:
            product = CatalogRepo(session).get_product(product_id)
            if not product:
                raise NotFound("Product not found")
            return product_to_dict(product)
