# storefront/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.api import api_router
from storefront.api.handlers import register_exception_handlers
from storefront.data.database import Database
from storefront.data.seed import seed_demo_catalog, seed_roles
from storefront.services.pricing import PricingPolicy, ZeroChargesPolicy
from storefront.utils.logging import get_logger
from storefront.utils.settings import (
    ALLOWED_ORIGINS,
    DATABASE_URL,
    ENVIRONMENT,
    HOST,
    PORT,
    SEED_DEMO_DATA,
)

logger = get_logger(__name__)


def create_app(database: Database | None = None, pricing: PricingPolicy | None = None) -> FastAPI:
    database = database or Database(DATABASE_URL)
    pricing = pricing or ZeroChargesPolicy()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting storefront ({ENVIRONMENT})")
        database.create_all()
        seed_roles(database)
        if SEED_DEMO_DATA:
            seed_demo_catalog(database)
        yield
        database.dispose()
        logger.info("Storefront stopped")

    app = FastAPI(
        title="Storefront",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.database = database
    app.state.pricing = pricing

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        # credentials tylko dla jawnej listy originow
        allow_credentials="*" not in ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
