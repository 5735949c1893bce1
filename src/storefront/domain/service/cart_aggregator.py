"""Domain service: Cart Aggregator.

Builds the priced view of a cart on every read. Cart lines carry no price,
so the view always reflects the product rows as they are now; a line whose
inventory cell is missing or empty is kept (with ``in_stock == 0``) so the
caller can show it as out of stock.
"""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import CartLineView, CartTotals, CartView
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.inventory_repository import InventoryRepository
from storefront.domain.repository.product_repository import ProductRepository


class CartAggregator:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._inventory_repo = inventory_repo

    def materialize(self, user_id: int) -> CartView:
        views: list[CartLineView] = []
        for line in reversed(self._cart_repo.list_for_user(user_id)):
            product = self._product_repo.get_by_id(line.key.product_id)
            if product is None:
                # Product deletes cascade to cart lines in the store.
                raise EntityNotFoundError(
                    f"Product #{line.key.product_id} in cart line #{line.id} not found"
                )
            cell = self._inventory_repo.get(line.key)
            views.append(
                CartLineView(
                    line_id=line.id,  # type: ignore[arg-type]
                    key=line.key,
                    product_name=product.name,
                    quantity=line.quantity.value,
                    base_price=product.base_price,
                    discount_percentage=product.discount_percentage,
                    final_price=product.final_price,
                    in_stock=cell.quantity if cell is not None else 0,
                )
            )
        return CartView(lines=views, totals=CartTotals.compute(views))
