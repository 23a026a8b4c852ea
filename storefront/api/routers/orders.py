# storefront/api/routers/orders.py
import uuid
from typing import List

from fastapi import APIRouter, Body, Depends

from storefront.api.dependencies import get_current_user, get_database, get_pricing
from storefront.data.database import Database
from storefront.data.models.user import UserModel
from storefront.domain.schemas import CheckoutIn, OrderDetailOut, OrderOut
from storefront.services.checkout_service import CheckoutService
from storefront.services.order_service import OrderService, order_to_dict
from storefront.services.pricing import PricingPolicy

router = APIRouter(tags=["orders"])


def get_checkout_service(
    database: Database = Depends(get_database),
    pricing: PricingPolicy = Depends(get_pricing),
) -> CheckoutService:
    return CheckoutService(database, pricing=pricing)


def get_order_service(database: Database = Depends(get_database)) -> OrderService:
    return OrderService(database)


@router.post("/checkout", response_model=OrderOut, status_code=201)
def checkout(
    payload: CheckoutIn | None = Body(None),
    user: UserModel = Depends(get_current_user),
    svc: CheckoutService = Depends(get_checkout_service),
):
    """
    Zamienia koszyk zalogowanego uzytkownika na zamowienie.
    Pusty koszyk -> 400 "Cart is empty".
    """
    payload = payload or CheckoutIn()
    order = svc.checkout(user.id, shipping=payload.shipping, payment=payload.payment)
    return order_to_dict(order)


@router.get("/orders", response_model=List[OrderOut])
def list_orders(user: UserModel = Depends(get_current_user), svc: OrderService = Depends(get_order_service)):
    return svc.list_orders(user.id)


@router.get("/orders/{order_id}", response_model=OrderDetailOut)
def get_order(
    order_id: uuid.UUID,
    user: UserModel = Depends(get_current_user),
    svc: OrderService = Depends(get_order_service),
):
    return svc.get_order(order_id, user.id)
