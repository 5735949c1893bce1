"""Application service: Add Product Image use case."""

from __future__ import annotations

from storefront.application.dto import CandidateResult
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import ProductImage
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.singleton_flag_maintainer import SingletonFlagMaintainer


class AddProductImageHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(
        self, product_id: int, image_url: str, is_primary: bool = False
    ) -> CandidateResult:
        image = ProductImage.create(product_id, image_url)

        with self._uow_factory() as uow:
            if not uow.images.lock_owner(product_id):
                raise EntityNotFoundError(f"Product #{product_id} not found")
            uow.images.add(image)
            effective = SingletonFlagMaintainer(
                uow.images, label="image"
            ).on_candidate_created(product_id, image.id, is_primary)  # type: ignore[arg-type]
            uow.commit()

        return CandidateResult(id=image.id, is_default=effective)  # type: ignore[arg-type]
