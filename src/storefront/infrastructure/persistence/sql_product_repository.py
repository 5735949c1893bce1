"""SQLAlchemy implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import delete, select

from storefront.domain.model.product import Product, ProductColor, ProductSize
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.sql_repository import SqlRepository
from storefront.infrastructure.persistence.tables import (
    ProductColorRow,
    ProductRow,
    ProductSizeRow,
)


class SqlProductRepository(SqlRepository, ProductRepository):

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        row = self._session.get(ProductRow, product_id)
        return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Product]:
        rows = self._session.execute(select(ProductRow).order_by(ProductRow.id)).scalars()
        return [self._to_domain(row) for row in rows]

    def add(self, product: Product) -> Product:
        row = ProductRow(
            name=product.name,
            description=product.description,
            base_price=float(product.base_price),
            discount_percentage=float(product.discount_percentage),
        )
        self._session.add(row)
        self._flush()
        product.id = row.id
        return product

    def save(self, product: Product) -> None:
        row = self._session.get(ProductRow, product.id)
        if row is None:
            return
        row.base_price = float(product.base_price)
        row.discount_percentage = float(product.discount_percentage)
        self._flush()

    def delete(self, product_id: int) -> None:
        self._session.execute(delete(ProductRow).where(ProductRow.id == product_id))
        self._session.expire_all()

    def add_color(self, color: ProductColor) -> ProductColor:
        row = ProductColorRow(
            product_id=color.product_id, color_name=color.color_name, color_hex=color.color_hex
        )
        self._session.add(row)
        self._flush()
        return ProductColor(row.id, row.product_id, row.color_name, row.color_hex)

    def add_size(self, size: ProductSize) -> ProductSize:
        row = ProductSizeRow(product_id=size.product_id, size_name=size.size_name)
        self._session.add(row)
        self._flush()
        return ProductSize(row.id, row.product_id, row.size_name)

    def get_color(self, product_id: int, color_id: int) -> ProductColor | None:
        row = self._session.get(ProductColorRow, color_id)
        if row is None or row.product_id != product_id:
            return None
        return ProductColor(row.id, row.product_id, row.color_name, row.color_hex)

    def get_size(self, product_id: int, size_id: int) -> ProductSize | None:
        row = self._session.get(ProductSizeRow, size_id)
        if row is None or row.product_id != product_id:
            return None
        return ProductSize(row.id, row.product_id, row.size_name)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(row: ProductRow) -> Product:
        return Product(
            id=row.id,
            name=row.name,
            description=row.description or "",
            base_price=Money.of(row.base_price),
            discount_percentage=Decimal(str(row.discount_percentage)),
            created_at=row.created_at,
        )
