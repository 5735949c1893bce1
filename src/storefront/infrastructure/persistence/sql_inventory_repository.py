"""SQLAlchemy implementation of InventoryRepository."""

from __future__ import annotations

from sqlalchemy import select

from storefront.domain.model.inventory import InventoryCell
from storefront.domain.model.value_objects import VariantKey
from storefront.domain.repository.inventory_repository import InventoryRepository
from storefront.infrastructure.persistence.sql_repository import SqlRepository
from storefront.infrastructure.persistence.tables import InventoryRow


class SqlInventoryRepository(SqlRepository, InventoryRepository):

    def get(self, key: VariantKey) -> InventoryCell | None:
        row = self._session.execute(self._select(key)).scalar_one_or_none()
        return self._to_domain(row) if row is not None else None

    def get_for_update(self, key: VariantKey) -> InventoryCell | None:
        stmt = self._select(key).with_for_update().execution_options(populate_existing=True)
        row = self._session.execute(stmt).scalar_one_or_none()
        return self._to_domain(row) if row is not None else None

    def list_for_product(self, product_id: int) -> list[InventoryCell]:
        stmt = (
            select(InventoryRow)
            .where(InventoryRow.product_id == product_id)
            .order_by(InventoryRow.color_id, InventoryRow.size_id)
        )
        return [self._to_domain(row) for row in self._session.execute(stmt).scalars()]

    def save(self, cell: InventoryCell) -> None:
        row = self._session.execute(self._select(cell.key)).scalar_one_or_none()
        if row is None:
            row = InventoryRow(
                product_id=cell.key.product_id,
                color_id=cell.key.color_id,
                size_id=cell.key.size_id,
            )
            self._session.add(row)
        row.quantity = cell.quantity
        row.updated_at = cell.updated_at
        self._flush()
        cell.id = row.id

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    def _select(key: VariantKey):
        return select(InventoryRow).where(
            InventoryRow.product_id == key.product_id,
            InventoryRow.color_id == key.color_id,
            InventoryRow.size_id == key.size_id,
        )

    @staticmethod
    def _to_domain(row: InventoryRow) -> InventoryCell:
        return InventoryCell(
            key=VariantKey(row.product_id, row.color_id, row.size_id),
            quantity=row.quantity,
            id=row.id,
            updated_at=row.updated_at,
        )
