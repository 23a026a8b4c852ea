# storefront/data/models/catalog.py
import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, Uuid, CheckConstraint
from sqlalchemy.orm import relationship

from storefront.data.database import Base
from storefront.data.models.user import utcnow


class CategoryModel(Base):
    __tablename__ = "categories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True)
    description = Column(Text, nullable=True)


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    category_id = Column(Uuid, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)

    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True)
    description = Column(Text, nullable=True)

    # ceny w groszach/centach, bez floatow
    price_cents = Column(Integer, nullable=False)
    currency_code = Column(String(3), nullable=False, default="USD")

    sku = Column(String(100), nullable=True, unique=True)
    image_url = Column(String(1024), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    category = relationship("CategoryModel", lazy="joined")
    inventory = relationship("InventoryModel", uselist=False, lazy="joined")

    __table_args__ = (CheckConstraint("price_cents >= 0", name="ck_products_price_non_negative"),)


class InventoryModel(Base):
    """Stan magazynu, tylko do wyswietlania (bez rezerwacji)."""

    __tablename__ = "inventory"

    product_id = Column(Uuid, ForeignKey("products.id", ondelete="CASCADE"), primary_key=True)
    quantity = Column(Integer, nullable=False, default=0)
    reserved = Column(Integer, nullable=False, default=0)
