"""Product aggregate and its dependent rows.

Products live independently of carts and orders. Their price can change at
any time; carts always re-read it, orders freeze it at placement.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

_HUNDRED = Decimal("100")


@dataclass
class Product:
    """A product in the catalog.

    ``final_price`` is derived on every access from ``base_price`` and
    ``discount_percentage``; it is never stored.
    """

    id: int | None
    name: str
    base_price: Money
    discount_percentage: Decimal = Decimal("0")
    description: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        name: str,
        base_price: Money,
        discount_percentage: Decimal | str | int = 0,
        description: str = "",
    ) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        product = Product(
            id=None,
            name=name.strip(),
            base_price=base_price,
            description=description,
        )
        product.reprice(base_price, discount_percentage)
        return product

    @property
    def final_price(self) -> Money:
        return self.base_price * (1 - self.discount_percentage / _HUNDRED)

    def reprice(
        self,
        base_price: Money,
        discount_percentage: Decimal | str | int | None = None,
    ) -> None:
        """Change the price and optionally the discount.

        Existing orders are unaffected; open carts see the new price on
        their next read.
        """
        if discount_percentage is not None:
            discount = Decimal(str(discount_percentage))
            if discount < 0 or discount > _HUNDRED:
                raise ValidationError("Discount percentage must be between 0 and 100")
            self.discount_percentage = discount
        self.base_price = base_price


@dataclass(frozen=True)
class ProductColor:
    id: int | None
    product_id: int
    color_name: str
    color_hex: str


@dataclass(frozen=True)
class ProductSize:
    id: int | None
    product_id: int
    size_name: str


@dataclass
class ProductImage:
    """A product image; at most one per product carries ``is_primary``.

    The flag is only ever changed by the singleton flag maintainer.
    """

    id: int | None
    product_id: int
    image_url: str
    is_primary: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(product_id: int, image_url: str) -> ProductImage:
        if not image_url or not image_url.strip():
            raise ValidationError("Image URL is required")
        return ProductImage(id=None, product_id=product_id, image_url=image_url.strip())
