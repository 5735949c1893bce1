"""Application service: Add Product use case."""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory


class AddProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self,
        name: str,
        price: str,
        description: str = "",
        discount_percentage: str | Decimal = "0",
    ) -> int:
        """Create a new product and return its id."""
        product = Product.create(
            name=name,
            base_price=Money.of(price),
            discount_percentage=discount_percentage,
            description=description,
        )

        with self._uow_factory() as uow:
            uow.products.add(product)
            uow.commit()

        return product.id  # type: ignore[return-value]
