# storefront/repos/review_repo.py
import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.models.review import ReviewModel


class ReviewRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_approved_for_product(self, product_id: uuid.UUID) -> list[ReviewModel]:
        return list(
            self.db.execute(
                select(ReviewModel)
                .where(ReviewModel.product_id == product_id, ReviewModel.is_approved.is_(True))
                .order_by(ReviewModel.created_at.desc())
            ).unique().scalars().all()
        )

    def get_for_user(self, product_id: uuid.UUID, user_id: uuid.UUID) -> ReviewModel | None:
        return self.db.execute(
            select(ReviewModel).where(
                ReviewModel.product_id == product_id,
                ReviewModel.user_id == user_id,
            )
        ).unique().scalar_one_or_none()

    def create_review(self, review: ReviewModel) -> ReviewModel:
        self.db.add(review)
        self.db.flush()
        return review
