# storefront/services/cart_service.py
import uuid
from typing import Any, Dict

from sqlalchemy.orm import Session

from storefront.data.database import Database
from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.domain.errors import BadRequest, Conflict, NotFound
from storefront.repos.cart_repo import CartRepo
from storefront.repos.catalog_repo import CatalogRepo
from storefront.utils.logging import get_logger
from storefront.utils.settings import DEFAULT_CURRENCY

logger = get_logger(__name__)


def get_or_create_cart(session: Session, user_id: uuid.UUID, for_update: bool = False) -> CartModel:
    """Koszyk tworzony leniwie przy pierwszym uzyciu, jeden na usera."""
    repo = CartRepo(session)
    cart = repo.get_cart_by_user(user_id, for_update=for_update)
    if cart:
        return cart

    # rownolegle utworzenie koszyka konczy sie naruszeniem unique(user_id) i rollbackiem
    cart = repo.create_cart(CartModel(user_id=user_id))
    logger.info(f"Utworzono koszyk {cart.id} dla uzytkownika {user_id}")
    return cart


class CartService:
    """
    Use case'y koszyka. Komendy (add, update, remove) i query (get),
    kazda operacja w osobnej transakcji.
    """

    def __init__(self, database: Database):
        self.database = database

    #query - odczyt (z leniwym utworzeniem koszyka)
    def get_cart(self, user_id: uuid.UUID) -> Dict[str, Any]:
        with self.database.transaction() as session:
            cart = get_or_create_cart(session, user_id)
            rows = CartRepo(session).get_cart_items_with_products(cart.id)

            items = [
                {
                    "id": item.id,
                    "product_id": item.product_id,
                    "quantity": item.quantity,
                    "unit_price_cents": item.unit_price_cents,
                    "currency_code": item.currency_code,
                    "product": {
                        "id": product.id,
                        "name": product.name,
                        "image_url": product.image_url,
                    },
                    "line_total_cents": item.quantity * item.unit_price_cents,
                }
                for item, product in rows
            ]

            return {
                "id": cart.id,
                "user_id": cart.user_id,
                "items": items,
                "subtotal_cents": sum(i["line_total_cents"] for i in items),
                "currency_code": items[0]["currency_code"] if items else DEFAULT_CURRENCY,
            }

    #commands
    def add_item(self, user_id: uuid.UUID, product_id: uuid.UUID, quantity: int) -> Dict[str, Any]:
        if quantity <= 0:
            raise BadRequest("Quantity must be greater than 0")

        with self.database.transaction() as session:
            repo = CartRepo(session)
            # ta sama blokada co w checkout, zmiany koszyka czekaja na jego commit
            cart = get_or_create_cart(session, user_id, for_update=True)

            # tylko aktywne produkty mozna dodac do koszyka
            product = CatalogRepo(session).get_active_product(product_id)
            if not product:
                raise NotFound("Product not found")

            currencies = repo.get_cart_currencies(cart.id)
            if currencies and currencies != {product.currency_code}:
                logger.warning(
                    f"Odrzucono produkt {product_id} ({product.currency_code}) "
                    f"w koszyku {cart.id} z walutami {sorted(currencies)}"
                )
                raise Conflict("Cart already contains items in a different currency")

            existing_item = repo.get_cart_item(cart.id, product_id)

            if existing_item:
                logger.info(
                    f"Produkt {product_id} juz jest w koszyku {cart.id}, zwiekszam ilosc "
                    f"z {existing_item.quantity} do {existing_item.quantity + quantity}"
                )
                # cena zostaje z pierwszego dodania
                existing_item.quantity += quantity
                session.flush()
                item = existing_item
            else:
                logger.info(f"Dodaje produkt {product_id} do koszyka {cart.id}")
                item = repo.add_cart_item(
                    CartItemModel(
                        cart_id=cart.id,
                        product_id=product_id,
                        quantity=quantity,
                        unit_price_cents=product.price_cents,
                        currency_code=product.currency_code,
                    )
                )

            return {"id": item.id, "product_id": item.product_id, "quantity": item.quantity}

    def update_item(self, user_id: uuid.UUID, item_id: uuid.UUID, quantity: int) -> Dict[str, Any]:
        if quantity <= 0:
            raise BadRequest("Quantity must be greater than 0")

        with self.database.transaction() as session:
            repo = CartRepo(session)
            cart = repo.get_cart_by_user(user_id, for_update=True)
            if not cart:
                raise NotFound("Cart not found")

            item = repo.get_cart_item_by_id(cart.id, item_id)
            if not item:
                raise NotFound("Cart item not found")

            item.quantity = quantity
            session.flush()

            logger.info(f"Pozycja {item_id} w koszyku {cart.id}: ilosc {quantity}")
            return {"id": item.id, "product_id": item.product_id, "quantity": item.quantity}

    def remove_item(self, user_id: uuid.UUID, item_id: uuid.UUID) -> None:
        with self.database.transaction() as session:
            repo = CartRepo(session)
            cart = repo.get_cart_by_user(user_id, for_update=True)
            if not cart:
                raise NotFound("Cart not found")

            if repo.delete_cart_item(cart.id, item_id) == 0:
                raise NotFound("Cart item not found")

            logger.info(f"Usunieto pozycje {item_id} z koszyka {cart.id}")
