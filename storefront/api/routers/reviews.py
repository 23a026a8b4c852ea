# storefront/api/routers/reviews.py
import uuid
from typing import List

from fastapi import APIRouter, Depends

from storefront.api.dependencies import get_current_user, get_database
from storefront.data.database import Database
from storefront.data.models.user import UserModel
from storefront.domain.schemas import ReviewIn, ReviewOut
from storefront.services.review_service import ReviewService

router = APIRouter(prefix="/products/{product_id}/reviews", tags=["reviews"])


def get_service(database: Database = Depends(get_database)) -> ReviewService:
    return ReviewService(database)


@router.get("", response_model=List[ReviewOut])
def list_reviews(product_id: uuid.UUID, svc: ReviewService = Depends(get_service)):
    return svc.list_for_product(product_id)


@router.post("", response_model=ReviewOut, status_code=201)
def create_review(
    product_id: uuid.UUID,
    payload: ReviewIn,
    user: UserModel = Depends(get_current_user),
    svc: ReviewService = Depends(get_service),
):
    """Jedna recenzja na produkt na uzytkownika."""
    return svc.create_review(product_id, user.id, payload)
