# storefront/repos/catalog_repo.py
import uuid

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from storefront.data.models.catalog import CategoryModel, ProductModel


class CatalogRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_categories(self) -> list[CategoryModel]:
        return list(
            self.db.execute(select(CategoryModel).order_by(CategoryModel.name.asc())).scalars().all()
        )

    def list_products(
        self,
        q: str | None = None,
        category_slug: str | None = None,
        active_only: bool = True,
        limit: int | None = None,
    ) -> list[ProductModel]:
        query = select(ProductModel).outerjoin(
            CategoryModel, CategoryModel.id == ProductModel.category_id
        )

        if active_only:
            query = query.where(ProductModel.is_active.is_(True))

        if q:
            pattern = f"%{q}%"
            query = query.where(
                or_(ProductModel.name.ilike(pattern), ProductModel.description.ilike(pattern))
            )

        if category_slug:
            query = query.where(CategoryModel.slug == category_slug)

        query = query.order_by(ProductModel.created_at.desc())
        if limit:
            query = query.limit(limit)

        return list(self.db.execute(query).unique().scalars().all())

    def get_product(self, product_id: uuid.UUID) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def get_active_product(self, product_id: uuid.UUID) -> ProductModel | None:
        return self.db.execute(
            select(ProductModel).where(
                ProductModel.id == product_id,
                ProductModel.is_active.is_(True),
            )
        ).unique().scalar_one_or_none()

    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.flush()
        return product

    def count_products(self) -> int:
        return self.db.execute(select(func.count(ProductModel.id))).scalar_one()
