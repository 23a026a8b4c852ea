# storefront/services/review_service.py
import uuid
from typing import Any, Dict, List

from storefront.data.database import Database
from storefront.data.models.review import ReviewModel
from storefront.domain.errors import Conflict, NotFound
from storefront.domain.schemas import ReviewIn
from storefront.repos.catalog_repo import CatalogRepo
from storefront.repos.review_repo import ReviewRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def review_to_dict(r: ReviewModel) -> Dict[str, Any]:
    return {
        "id": r.id,
        "product_id": r.product_id,
        "user_id": r.user_id,
        "rating": r.rating,
        "title": r.title,
        "body": r.body,
        "created_at": r.created_at,
    }


class ReviewService:
    def __init__(self, database: Database):
        self.database = database

    def list_for_product(self, product_id: uuid.UUID) -> List[Dict[str, Any]]:
        with self.database.session() as session:
            reviews = ReviewRepo(session).list_approved_for_product(product_id)
            result = []
            for r in reviews:
                author = "Anonymous"
                if r.user:
                    author = r.user.full_name or r.user.email
                result.append({**review_to_dict(r), "author_name": author})
            return result

    def create_review(self, product_id: uuid.UUID, user_id: uuid.UUID, payload: ReviewIn) -> Dict[str, Any]:
        with self.database.transaction() as session:
            if not CatalogRepo(session).get_product(product_id):
                raise NotFound("Product not found")

            repo = ReviewRepo(session)
            # jedna recenzja na produkt na usera
            if repo.get_for_user(product_id, user_id):
                raise Conflict("You already reviewed this product")

            review = repo.create_review(
                ReviewModel(
                    product_id=product_id,
                    user_id=user_id,
                    rating=payload.rating,
                    title=payload.title or None,
                    body=payload.body or None,
                    is_approved=True,
                )
            )
            result = review_to_dict(review)

        logger.info(f"Review {result['id']} created for product {product_id} by user {user_id}")
        return result
