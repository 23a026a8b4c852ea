# storefront/api/routers/admin.py
import uuid
from typing import List

from fastapi import APIRouter, Depends

from storefront.api.dependencies import get_database, require_admin
from storefront.data.database import Database
from storefront.domain.schemas import AdminOrderOut, IdOut, ProductIn, ProductOut, SummaryOut
from storefront.services.admin_service import AdminService

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


def get_service(database: Database = Depends(get_database)) -> AdminService:
    return AdminService(database)


@router.get("/summary", response_model=SummaryOut)
def summary(svc: AdminService = Depends(get_service)):
    return svc.summary()


@router.get("/orders", response_model=List[AdminOrderOut])
def list_orders(svc: AdminService = Depends(get_service)):
    return svc.list_orders()


@router.get("/products", response_model=List[ProductOut])
def list_products(svc: AdminService = Depends(get_service)):
    return svc.list_products()


@router.post("/products", response_model=IdOut, status_code=201)
def create_product(payload: ProductIn, svc: AdminService = Depends(get_service)):
    return svc.create_product(payload)


@router.put("/products/{product_id}", response_model=IdOut)
def update_product(product_id: uuid.UUID, payload: ProductIn, svc: AdminService = Depends(get_service)):
    return svc.update_product(product_id, payload)
