# storefront/repos/cart_repo.py
import uuid

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.catalog import ProductModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart_by_user(self, user_id: uuid.UUID, for_update: bool = False) -> CartModel | None:
        query = select(CartModel).where(CartModel.user_id == user_id)
        if for_update:
            # blokada wiersza koszyka do konca transakcji (postgres), sqlite ignoruje
            query = query.with_for_update()
        return self.db.execute(query).scalar_one_or_none()

    def create_cart(self, cart: CartModel) -> CartModel:
        self.db.add(cart)
        self.db.flush()
        return cart

    def get_cart_items_with_products(self, cart_id: uuid.UUID) -> list[tuple[CartItemModel, ProductModel]]:
        rows = self.db.execute(
            select(CartItemModel, ProductModel)
            .join(ProductModel, ProductModel.id == CartItemModel.product_id)
            .where(CartItemModel.cart_id == cart_id)
            .order_by(CartItemModel.created_at.desc())
        ).unique().all()
        return [(row[0], row[1]) for row in rows]

    def get_checkout_lines(self, cart_id: uuid.UUID):
        """
        Pozycje koszyka z nazwa i sku z katalogu.
        Cena i waluta zostaja z pozycji koszyka (snapshot z chwili dodania).
        """
        return self.db.execute(
            select(
                CartItemModel.id,
                CartItemModel.product_id,
                CartItemModel.quantity,
                CartItemModel.unit_price_cents,
                CartItemModel.currency_code,
                ProductModel.name.label("product_name"),
                ProductModel.sku.label("sku"),
            )
            .join(ProductModel, ProductModel.id == CartItemModel.product_id)
            .where(CartItemModel.cart_id == cart_id)
            .order_by(CartItemModel.created_at.asc(), CartItemModel.id.asc())
        ).all()

    def get_cart_item(self, cart_id: uuid.UUID, product_id: uuid.UUID) -> CartItemModel | None:
        return self.db.execute(
            select(CartItemModel).where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.product_id == product_id,
            )
        ).scalar_one_or_none()

    def get_cart_item_by_id(self, cart_id: uuid.UUID, item_id: uuid.UUID) -> CartItemModel | None:
        return self.db.execute(
            select(CartItemModel).where(
                CartItemModel.id == item_id,
                CartItemModel.cart_id == cart_id,
            )
        ).scalar_one_or_none()

    def get_cart_currencies(self, cart_id: uuid.UUID) -> set[str]:
        return set(
            self.db.execute(
                select(CartItemModel.currency_code)
                .where(CartItemModel.cart_id == cart_id)
                .distinct()
            ).scalars().all()
        )

    def add_cart_item(self, item: CartItemModel) -> CartItemModel:
        self.db.add(item)
        self.db.flush()
        return item

    def delete_cart_item(self, cart_id: uuid.UUID, item_id: uuid.UUID) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(
                CartItemModel.id == item_id,
                CartItemModel.cart_id == cart_id,
            )
        )
        return result.rowcount

    def clear_cart_items(self, cart_id: uuid.UUID, item_ids: list[uuid.UUID]) -> int:
        # tylko pozycje odczytane przy checkout, dodane w miedzyczasie zostaja w koszyku
        result = self.db.execute(
            delete(CartItemModel).where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.id.in_(item_ids),
            )
        )
        return result.rowcount
