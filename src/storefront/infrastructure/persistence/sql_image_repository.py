"""SQLAlchemy implementation of ImageRepository."""

from __future__ import annotations

from sqlalchemy import select

from storefront.domain.model.product import ProductImage
from storefront.domain.repository.image_repository import ImageRepository
from storefront.infrastructure.persistence.sql_repository import SqlCandidateRepository
from storefront.infrastructure.persistence.tables import ProductImageRow, ProductRow


class SqlImageRepository(SqlCandidateRepository, ImageRepository):
    row_class = ProductImageRow
    owner_row_class = ProductRow
    owner_column = "product_id"
    flag_column = "is_primary"

    def get(self, product_id: int, image_id: int) -> ProductImage | None:
        row = self._session.get(ProductImageRow, image_id)
        if row is None or row.product_id != product_id:
            return None
        return self._to_domain(row)

    def list_for_product(self, product_id: int) -> list[ProductImage]:
        stmt = (
            select(ProductImageRow)
            .where(ProductImageRow.product_id == product_id)
            .order_by(ProductImageRow.id)
        )
        return [self._to_domain(row) for row in self._session.execute(stmt).scalars()]

    def add(self, image: ProductImage) -> ProductImage:
        row = ProductImageRow(
            product_id=image.product_id, image_url=image.image_url, is_primary=False
        )
        self._session.add(row)
        self._flush()
        image.id = row.id
        image.is_primary = False
        return image

    @staticmethod
    def _to_domain(row: ProductImageRow) -> ProductImage:
        return ProductImage(
            id=row.id,
            product_id=row.product_id,
            image_url=row.image_url,
            is_primary=row.is_primary,
            created_at=row.created_at,
        )
