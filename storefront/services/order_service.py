# storefront/services/order_service.py
import uuid
from typing import Any, Dict, List

from storefront.data.database import Database
from storefront.data.models.order import OrderModel
from storefront.data.models.order_item import OrderItemModel
from storefront.domain.errors import NotFound
from storefront.repos.order_repo import OrderRepo


def order_to_dict(order: OrderModel) -> Dict[str, Any]:
    return {
        "id": order.id,
        "user_id": order.user_id,
        "status": order.status,
        "subtotal_cents": order.subtotal_cents,
        "tax_cents": order.tax_cents,
        "shipping_cents": order.shipping_cents,
        "total_cents": order.total_cents,
        "currency_code": order.currency_code,
        "shipping": {
            "name": order.shipping_name,
            "address1": order.shipping_address1,
            "address2": order.shipping_address2,
            "city": order.shipping_city,
            "state": order.shipping_state,
            "postal_code": order.shipping_postal_code,
            "country": order.shipping_country,
        },
        "created_at": order.created_at,
        "updated_at": order.updated_at,
    }


def order_item_to_dict(item: OrderItemModel) -> Dict[str, Any]:
    return {
        "id": item.id,
        "product_id": item.product_id,
        "product_name": item.product_name,
        "sku": item.sku,
        "quantity": item.quantity,
        "unit_price_cents": item.unit_price_cents,
        "currency_code": item.currency_code,
        "line_total_cents": item.line_total_cents,
    }


class OrderService:
    """
    Odczyt zamowien zalogowanego uzytkownika (query).
    Tworzenie zamowien jest w CheckoutService.
    """

    def __init__(self, database: Database):
        self.database = database

    def list_orders(self, user_id: uuid.UUID) -> List[Dict[str, Any]]:
        with self.database.session() as session:
            orders = OrderRepo(session).list_orders_for_user(user_id)
            return [order_to_dict(o) for o in orders]

    def get_order(self, order_id: uuid.UUID, user_id: uuid.UUID) -> Dict[str, Any]:
        with self.database.session() as session:
            # cudze zamowienie wyglada tak samo jak nieistniejace
            order = OrderRepo(session).get_order_for_user(order_id, user_id)
            if not order:
                raise NotFound("Order not found")

            return {
                **order_to_dict(order),
                "items": [order_item_to_dict(i) for i in order.items],
            }
