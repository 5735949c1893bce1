"""Application services: add a color or a size to a product."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.product import ProductColor, ProductSize
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory


class AddProductColorHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: int, color_name: str, color_hex: str) -> int:
        if not color_name or not color_name.strip():
            raise ValidationError("Color name is required")
        if not color_hex or not color_hex.strip():
            raise ValidationError("Color hex code is required")

        with self._uow_factory() as uow:
            if uow.products.get_by_id(product_id) is None:
                raise EntityNotFoundError(f"Product #{product_id} not found")
            color = uow.products.add_color(
                ProductColor(None, product_id, color_name.strip(), color_hex.strip())
            )
            uow.commit()

        return color.id  # type: ignore[return-value]


class AddProductSizeHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: int, size_name: str) -> int:
        if not size_name or not size_name.strip():
            raise ValidationError("Size name is required")

        with self._uow_factory() as uow:
            if uow.products.get_by_id(product_id) is None:
                raise EntityNotFoundError(f"Product #{product_id} not found")
            size = uow.products.add_size(ProductSize(None, product_id, size_name.strip()))
            uow.commit()

        return size.id  # type: ignore[return-value]
