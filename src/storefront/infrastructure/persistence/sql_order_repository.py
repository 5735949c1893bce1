"""SQLAlchemy implementation of OrderRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from storefront.domain.model.order import Order, OrderLine, OrderStatus, PaymentStatus
from storefront.domain.model.value_objects import Money, Quantity, VariantKey
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.sql_repository import SqlRepository
from storefront.infrastructure.persistence.tables import OrderItemRow, OrderRow


class SqlOrderRepository(SqlRepository, OrderRepository):

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int, for_update: bool = False) -> Order | None:
        stmt = (
            select(OrderRow)
            .where(OrderRow.id == order_id)
            .options(selectinload(OrderRow.items))
        )
        if for_update:
            stmt = stmt.with_for_update()
        row = self._session.execute(stmt).scalar_one_or_none()
        return self._to_domain(row) if row is not None else None

    def list_all(self, user_id: int | None = None) -> list[Order]:
        stmt = select(OrderRow).options(selectinload(OrderRow.items))
        if user_id is not None:
            stmt = stmt.where(OrderRow.user_id == user_id)
        stmt = stmt.order_by(OrderRow.id.desc())
        return [self._to_domain(row) for row in self._session.execute(stmt).scalars()]

    def add(self, order: Order) -> Order:
        row = OrderRow(
            user_id=order.user_id,
            address_id=order.address_id,
            total_amount=float(order.total_amount),
            payment_method=order.payment_method,
            payment_status=order.payment_status.value,
            order_status=order.order_status.value,
            created_at=order.created_at,
            updated_at=order.updated_at,
            items=[
                OrderItemRow(
                    product_id=line.key.product_id,
                    color_id=line.key.color_id,
                    size_id=line.key.size_id,
                    quantity=line.quantity.value,
                    price_per_unit=float(line.unit_price),
                )
                for line in order.lines
            ],
        )
        self._session.add(row)
        self._flush()
        order.id = row.id
        order.lines = [self._line_to_domain(item) for item in row.items]
        return order

    def save_status(self, order: Order) -> None:
        row = self._session.get(OrderRow, order.id)
        if row is None:
            return
        row.payment_status = order.payment_status.value
        row.order_status = order.order_status.value
        row.stock_released = order.stock_released
        row.updated_at = order.updated_at
        self._flush()

    # --- Mapping --------------------------------------------------------------

    @classmethod
    def _to_domain(cls, row: OrderRow) -> Order:
        return Order(
            id=row.id,
            user_id=row.user_id,
            address_id=row.address_id,
            payment_method=row.payment_method,
            lines=[cls._line_to_domain(item) for item in row.items],
            total_amount=Money.of(row.total_amount),
            payment_status=PaymentStatus(row.payment_status),
            order_status=OrderStatus(row.order_status),
            stock_released=row.stock_released,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    @staticmethod
    def _line_to_domain(item: OrderItemRow) -> OrderLine:
        return OrderLine(
            id=item.id,
            key=VariantKey(item.product_id, item.color_id, item.size_id),
            quantity=Quantity(item.quantity),
            unit_price=Money.of(item.price_per_unit),
        )
