# storefront/api/routers/health.py
from datetime import datetime, timezone

from fastapi import APIRouter

from storefront.domain.schemas import HealthOut
from storefront.utils.settings import ENVIRONMENT

router = APIRouter(tags=["health"])


@router.get("/", response_model=HealthOut)
def health_check():
    return {
        "status": "ok",
        "message": "Service is healthy",
        "environment": ENVIRONMENT,
        "timestamp": datetime.now(timezone.utc),
    }
