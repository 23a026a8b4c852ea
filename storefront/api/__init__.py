# storefront/api/__init__.py
from fastapi import APIRouter

from storefront.api.routers import admin, auth, cart, catalog, health, orders, reviews

api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(catalog.router)
api_router.include_router(reviews.router)
api_router.include_router(cart.router)
api_router.include_router(orders.router)
api_router.include_router(admin.router)

__all__ = ["api_router"]
