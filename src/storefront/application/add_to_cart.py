"""Application service: Add To Cart use case.

Adding a variant that is already in the cart replaces that line's
quantity. The user row is locked first so two adds of the same variant
meet the same line. The stock check here is advisory; the binding check
happens under the row lock at checkout.
"""

from __future__ import annotations

from storefront.application.set_inventory import ensure_variant_exists
from storefront.domain.exceptions import EntityNotFoundError, InsufficientStockError
from storefront.domain.model.cart import CartLine
from storefront.domain.model.value_objects import Quantity, VariantKey
from storefront.domain.repository.unit_of_work import UnitOfWork, UnitOfWorkFactory
from storefront.domain.service.inventory_ledger import InventoryLedger


def ensure_in_stock(uow: UnitOfWork, key: VariantKey, quantity: Quantity) -> None:
    available = InventoryLedger(uow.inventory).check_available(key)
    if available < quantity.value:
        raise InsufficientStockError(
            key.product_id,
            key.color_id,
            key.size_id,
            available=available,
            requested=quantity.value,
        )


class AddToCartHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self, user_id: int, product_id: int, color_id: int, size_id: int, quantity: int
    ) -> int:
        """Put a variant in the user's cart and return the cart line id."""
        key = VariantKey(product_id, color_id, size_id)
        qty = Quantity(quantity)

        with self._uow_factory() as uow:
            if not uow.users.lock(user_id):
                raise EntityNotFoundError(f"User #{user_id} not found")
            ensure_variant_exists(uow, key)
            ensure_in_stock(uow, key, qty)

            line = uow.cart.find(user_id, key)
            if line is not None:
                line.change_quantity(qty)
                uow.cart.save(line)
            else:
                line = uow.cart.add(CartLine(id=None, user_id=user_id, key=key, quantity=qty))
            uow.commit()

        return line.id  # type: ignore[return-value]
