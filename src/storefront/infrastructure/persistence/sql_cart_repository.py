"""SQLAlchemy implementation of CartRepository."""

from __future__ import annotations

from sqlalchemy import delete, select

from storefront.domain.model.cart import CartLine
from storefront.domain.model.value_objects import Quantity, VariantKey
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.persistence.sql_repository import SqlRepository
from storefront.infrastructure.persistence.tables import CartLineRow


class SqlCartRepository(SqlRepository, CartRepository):

    def get(self, user_id: int, line_id: int) -> CartLine | None:
        row = self._session.get(CartLineRow, line_id)
        if row is None or row.user_id != user_id:
            return None
        return self._to_domain(row)

    def find(self, user_id: int, key: VariantKey) -> CartLine | None:
        stmt = select(CartLineRow).where(
            CartLineRow.user_id == user_id,
            CartLineRow.product_id == key.product_id,
            CartLineRow.color_id == key.color_id,
            CartLineRow.size_id == key.size_id,
        )
        row = self._session.execute(stmt).scalar_one_or_none()
        return self._to_domain(row) if row is not None else None

    def list_for_user(self, user_id: int) -> list[CartLine]:
        stmt = (
            select(CartLineRow)
            .where(CartLineRow.user_id == user_id)
            .order_by(CartLineRow.id)
        )
        return [self._to_domain(row) for row in self._session.execute(stmt).scalars()]

    def add(self, line: CartLine) -> CartLine:
        row = CartLineRow(
            user_id=line.user_id,
            product_id=line.key.product_id,
            color_id=line.key.color_id,
            size_id=line.key.size_id,
            quantity=line.quantity.value,
        )
        self._session.add(row)
        self._flush()
        line.id = row.id
        return line

    def save(self, line: CartLine) -> None:
        row = self._session.get(CartLineRow, line.id)
        if row is None:
            return
        row.quantity = line.quantity.value
        row.updated_at = line.updated_at
        self._flush()

    def delete(self, user_id: int, line_id: int) -> None:
        self._session.execute(
            delete(CartLineRow).where(
                CartLineRow.id == line_id, CartLineRow.user_id == user_id
            )
        )

    def clear(self, user_id: int) -> int:
        result = self._session.execute(
            delete(CartLineRow).where(CartLineRow.user_id == user_id)
        )
        return result.rowcount

    @staticmethod
    def _to_domain(row: CartLineRow) -> CartLine:
        return CartLine(
            id=row.id,
            user_id=row.user_id,
            key=VariantKey(row.product_id, row.color_id, row.size_id),
            quantity=Quantity(row.quantity),
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
