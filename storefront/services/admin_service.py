# storefront/services/admin_service.py
import uuid
from typing import Any, Dict, List

from sqlalchemy import or_, select

from storefront.data.database import Database
from storefront.data.models.catalog import CategoryModel, ProductModel
from storefront.domain.errors import Conflict, NotFound
from storefront.domain.schemas import ProductIn
from storefront.repos.catalog_repo import CatalogRepo
from storefront.repos.order_repo import OrderRepo
from storefront.repos.user_repo import UserRepo
from storefront.services.catalog_service import product_to_dict
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

ADMIN_ORDERS_LIMIT = 200
ADMIN_PRODUCTS_LIMIT = 500


class AdminService:
    """Panel admina: liczniki, ostatnie zamowienia, CRUD produktow."""

    def __init__(self, database: Database):
        self.database = database

    def summary(self) -> Dict[str, int]:
        with self.database.session() as session:
            return {
                "users": UserRepo(session).count_users(),
                "orders": OrderRepo(session).count_orders(),
                "products": CatalogRepo(session).count_products(),
            }

    def list_orders(self) -> List[Dict[str, Any]]:
        with self.database.session() as session:
            orders = OrderRepo(session).list_latest_orders(limit=ADMIN_ORDERS_LIMIT)
            return [
                {
                    "id": o.id,
                    "user_id": o.user_id,
                    "user_email": o.user.email if o.user else None,
                    "status": o.status,
                    "subtotal_cents": o.subtotal_cents,
                    "tax_cents": o.tax_cents,
                    "shipping_cents": o.shipping_cents,
                    "total_cents": o.total_cents,
                    "currency_code": o.currency_code,
                    "created_at": o.created_at,
                    "updated_at": o.updated_at,
                }
                for o in orders
            ]

    def list_products(self) -> List[Dict[str, Any]]:
        with self.database.session() as session:
            products = CatalogRepo(session).list_products(active_only=False, limit=ADMIN_PRODUCTS_LIMIT)
            return [product_to_dict(p) for p in products]

    def create_product(self, payload: ProductIn) -> Dict[str, Any]:
        with self.database.transaction() as session:
            self._validate_product(session, payload)
            product = CatalogRepo(session).create_product(ProductModel(**self._columns(payload)))
            product_id = product.id

        logger.info(f"Product {product_id} ({payload.slug}) created")
        return {"id": product_id}

    def update_product(self, product_id: uuid.UUID, payload: ProductIn) -> Dict[str, Any]:
        with self.database.transaction() as session:
            product = CatalogRepo(session).get_product(product_id)
            if not product:
                raise NotFound("Product not found")

            self._validate_product(session, payload, exclude_id=product_id)
            for key, value in self._columns(payload).items():
                setattr(product, key, value)
            session.flush()

        # koszyki trzymaja cene z chwili dodania, zmiana ceny ich nie rusza
        logger.info(f"Product {product_id} updated")
        return {"id": product_id}

    @staticmethod
    def _columns(payload: ProductIn) -> Dict[str, Any]:
        return {
            "category_id": payload.category_id,
            "name": payload.name,
            "slug": payload.slug,
            "description": payload.description or None,
            "price_cents": payload.price_cents,
            "currency_code": (payload.currency_code or "USD").upper(),
            "sku": payload.sku or None,
            "image_url": payload.image_url or None,
            "is_active": payload.is_active,
        }

    @staticmethod
    def _validate_product(session, payload: ProductIn, exclude_id: uuid.UUID | None = None) -> None:
        if payload.category_id and not session.get(CategoryModel, payload.category_id):
            raise NotFound("Category not found")

        conditions = [ProductModel.slug == payload.slug]
        if payload.sku:
            conditions.append(ProductModel.sku == payload.sku)

        query = select(ProductModel.id).where(or_(*conditions))
        if exclude_id:
            query = query.where(ProductModel.id != exclude_id)

        if session.execute(query).first():
            raise Conflict("Duplicate slug/sku")
