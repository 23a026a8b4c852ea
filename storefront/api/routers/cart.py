# storefront/api/routers/cart.py
import uuid

from fastapi import APIRouter, Depends, Response

from storefront.api.dependencies import get_current_user, get_database
from storefront.data.database import Database
from storefront.data.models.user import UserModel
from storefront.domain.schemas import CartItemRefOut, CartOut, ItemIn, ItemQuantityIn
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(database: Database = Depends(get_database)) -> CartService:
    return CartService(database)


@router.get("", response_model=CartOut)
def get_cart(user: UserModel = Depends(get_current_user), svc: CartService = Depends(get_service)):
    return svc.get_cart(user.id)


@router.post("/items", response_model=CartItemRefOut, status_code=201)
def add_item(
    payload: ItemIn,
    user: UserModel = Depends(get_current_user),
    svc: CartService = Depends(get_service),
):
    """Dodaje produkt albo zwieksza ilosc jesli juz jest w koszyku."""
    return svc.add_item(user.id, payload.product_id, payload.quantity)


@router.patch("/items/{item_id}", response_model=CartItemRefOut)
def update_item(
    item_id: uuid.UUID,
    payload: ItemQuantityIn,
    user: UserModel = Depends(get_current_user),
    svc: CartService = Depends(get_service),
):
    return svc.update_item(user.id, item_id, payload.quantity)


@router.delete("/items/{item_id}", status_code=204, response_class=Response)
def remove_item(
    item_id: uuid.UUID,
    user: UserModel = Depends(get_current_user),
    svc: CartService = Depends(get_service),
):
    svc.remove_item(user.id, item_id)
    return Response(status_code=204)
