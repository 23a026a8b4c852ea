# storefront/api/routers/catalog.py
import uuid
from typing import List

from fastapi import APIRouter, Depends, Query

from storefront.api.dependencies import get_database
from storefront.data.database import Database
from storefront.domain.schemas import CategoryOut, ProductOut
from storefront.services.catalog_service import CatalogService

router = APIRouter(tags=["catalog"])


def get_service(database: Database = Depends(get_database)) -> CatalogService:
    return CatalogService(database)


@router.get("/categories", response_model=List[CategoryOut])
def list_categories(svc: CatalogService = Depends(get_service)):
    return svc.list_categories()


@router.get("/products", response_model=List[ProductOut])
def list_products(
    q: str | None = Query(None, description="Search by name/description"),
    category: str | None = Query(None, description="Category slug"),
    svc: CatalogService = Depends(get_service),
):
    return svc.list_products(q=q, category=category)


@router.get("/products/{product_id}", response_model=ProductOut)
def get_product(product_id: uuid.UUID, svc: CatalogService = Depends(get_service)):
    return svc.get_product(product_id)
