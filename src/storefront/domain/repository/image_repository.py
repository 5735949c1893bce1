"""Abstract repository for product images."""

from __future__ import annotations

from abc import abstractmethod

from storefront.domain.model.product import ProductImage
from storefront.domain.repository.candidate_repository import CandidateRepository


class ImageRepository(CandidateRepository):

    @abstractmethod
    def get(self, product_id: int, image_id: int) -> ProductImage | None:
        """Return the image if it belongs to the product, else None."""

    @abstractmethod
    def list_for_product(self, product_id: int) -> list[ProductImage]:
        """Return every image of the product, ascending id."""

    @abstractmethod
    def add(self, image: ProductImage) -> ProductImage:
        """Insert a new image and assign its id. The flag starts cleared."""
