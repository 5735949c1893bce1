"""Application service: Delete Product use case.

The store cascades the delete to the product's images, colors, sizes,
inventory cells and cart lines. A product that appears on any order line
cannot be deleted and the store reports a ConflictError.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    def handle(self, product_id: int) -> None:
        with self._uow_factory() as uow:
            if uow.products.get_by_id(product_id) is None:
                raise EntityNotFoundError(f"Product #{product_id} not found")
            uow.products.delete(product_id)
            uow.commit()

        logger.info("Deleted product %s", product_id)
