"""Application service: Delete Product Image use case.

Unlike addresses, promoting a new primary image after the primary was
deleted is best effort: it runs inside a savepoint, and if the store
rejects it the failure is logged and the delete still commits. The next
image insert for the product heals a product left without a primary.
"""

from __future__ import annotations

import logging

from storefront.application.dto import DeletionResult
from storefront.domain.exceptions import (
    ConflictError,
    EntityNotFoundError,
    TransactionFailure,
)
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.singleton_flag_maintainer import SingletonFlagMaintainer

logger = logging.getLogger(__name__)


class DeleteProductImageHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: int, image_id: int) -> DeletionResult:
        promoted: int | None = None

        with self._uow_factory() as uow:
            uow.images.lock_owner(product_id)
            image = uow.images.get(product_id, image_id)
            if image is None:
                raise EntityNotFoundError(f"Image #{image_id} not found")

            uow.images.delete(product_id, image_id)
            try:
                with uow.savepoint():
                    promoted = SingletonFlagMaintainer(
                        uow.images, label="image"
                    ).on_candidate_deleted(product_id, image_id, was_default=image.is_primary)
            except (ConflictError, TransactionFailure) as exc:
                logger.warning(
                    "Could not promote a new primary image for product %s: %s",
                    product_id,
                    exc,
                )
                promoted = None
            uow.commit()

        return DeletionResult(promoted_id=promoted)
