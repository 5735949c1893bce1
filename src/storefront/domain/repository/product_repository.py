"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product, ProductColor, ProductSize


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Insert a new product and assign its id."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist price and discount changes of an existing product."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product; dependent rows cascade in the store."""

    @abstractmethod
    def add_color(self, color: ProductColor) -> ProductColor:
        """Insert a color for a product and assign its id."""

    @abstractmethod
    def add_size(self, size: ProductSize) -> ProductSize:
        """Insert a size for a product and assign its id."""

    @abstractmethod
    def get_color(self, product_id: int, color_id: int) -> ProductColor | None:
        """Return the color if it belongs to the product, else None."""

    @abstractmethod
    def get_size(self, product_id: int, size_id: int) -> ProductSize | None:
        """Return the size if it belongs to the product, else None."""
