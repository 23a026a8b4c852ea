# storefront/domain/schemas.py
import uuid
from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON na zewnatrz w camelCase, w kodzie snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ---------- Auth ----------

class RegisterIn(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", max_length=255)
    password: str = Field(..., min_length=6)


class LoginIn(CamelModel):
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", max_length=255)
    password: str = Field(..., min_length=1)


class AuthUserOut(CamelModel):
    id: uuid.UUID
    email: str
    name: str


class AuthOut(CamelModel):
    token: str
    user: AuthUserOut


class MeOut(AuthUserOut):
    is_admin: bool


# ---------- Catalog ----------

class CategoryOut(CamelModel):
    id: uuid.UUID
    name: str
    slug: str
    description: str | None = None


class InventoryOut(CamelModel):
    quantity: int
    reserved: int


class ProductOut(CamelModel):
    id: uuid.UUID
    category_id: uuid.UUID | None = None
    category_name: str | None = None
    category_slug: str | None = None
    name: str
    slug: str
    description: str | None = None
    price_cents: int
    currency_code: str
    sku: str | None = None
    image_url: str | None = None
    is_active: bool
    inventory: InventoryOut | None = None


class ProductIn(CamelModel):
    """Schema dla tworzenia/aktualizacji produktu (admin)."""

    category_id: uuid.UUID | None = None
    name: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1)
    description: str | None = None
    price_cents: int = Field(..., ge=0)
    currency_code: str = Field("USD", min_length=3, max_length=3)
    sku: str | None = None
    image_url: str | None = None
    is_active: bool = True


class IdOut(CamelModel):
    id: uuid.UUID


# ---------- Reviews ----------

class ReviewIn(CamelModel):
    rating: int = Field(..., ge=1, le=5)
    title: str | None = None
    body: str | None = None


class ReviewOut(CamelModel):
    id: uuid.UUID
    product_id: uuid.UUID
    user_id: uuid.UUID | None = None
    rating: int
    title: str | None = None
    body: str | None = None
    created_at: datetime
    author_name: str | None = None


# ---------- Cart ----------

class ItemIn(CamelModel):
    product_id: uuid.UUID
    quantity: int = Field(..., ge=1)


class ItemQuantityIn(CamelModel):
    quantity: int = Field(..., ge=1)


class CartItemRefOut(CamelModel):
    id: uuid.UUID
    product_id: uuid.UUID
    quantity: int


class CartProductOut(CamelModel):
    id: uuid.UUID
    name: str
    image_url: str | None = None


class CartItemOut(CamelModel):
    id: uuid.UUID
    product_id: uuid.UUID
    quantity: int
    unit_price_cents: int
    currency_code: str
    product: CartProductOut
    line_total_cents: int


class CartOut(CamelModel):
    id: uuid.UUID
    user_id: uuid.UUID
    items: List[CartItemOut]
    subtotal_cents: int
    currency_code: str


# ---------- Checkout / Orders ----------

class ShippingIn(CamelModel):
    name: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None


class PaymentIn(CamelModel):
    provider: str | None = None
    reference: str | None = None


class CheckoutIn(CamelModel):
    shipping: ShippingIn | None = None
    payment: PaymentIn | None = None


class ShippingOut(ShippingIn):
    pass


class OrderOut(CamelModel):
    id: uuid.UUID
    user_id: uuid.UUID | None = None
    status: str
    subtotal_cents: int
    tax_cents: int
    shipping_cents: int
    total_cents: int
    currency_code: str
    shipping: ShippingOut
    created_at: datetime
    updated_at: datetime


class OrderItemOut(CamelModel):
    id: uuid.UUID
    product_id: uuid.UUID | None = None
    product_name: str
    sku: str | None = None
    quantity: int
    unit_price_cents: int
    currency_code: str
    line_total_cents: int


class OrderDetailOut(OrderOut):
    items: List[OrderItemOut]


class AdminOrderOut(CamelModel):
    id: uuid.UUID
    user_id: uuid.UUID | None = None
    user_email: str | None = None
    status: str
    subtotal_cents: int
    tax_cents: int
    shipping_cents: int
    total_cents: int
    currency_code: str
    created_at: datetime
    updated_at: datetime


# ---------- Admin / Health ----------

class SummaryOut(CamelModel):
    users: int
    orders: int
    products: int


class HealthOut(CamelModel):
    status: str
    message: str
    environment: str
    timestamp: datetime
