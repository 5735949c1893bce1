"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the request layer (CLI) and the application
layer without exposing domain internals. Money leaves as formatted strings.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import CartView
from storefront.domain.model.customer import Address
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product


@dataclass(frozen=True)
class CandidateResult:
    """Output of creating or editing an address or image."""

    id: int
    is_default: bool


@dataclass(frozen=True)
class DeletionResult:
    """Output of deleting an address or image: the candidate that took the flag."""

    promoted_id: int | None


@dataclass(frozen=True)
class CheckoutResult:
    order_id: int
    total_amount: str  # formatted, e.g. "$253.00"


@dataclass(frozen=True)
class AddressDTO:
    id: int
    name: str
    street: str
    city: str
    state: str
    postal_code: str
    country: str
    phone: str
    is_default: bool

    @staticmethod
    def from_domain(address: Address) -> AddressDTO:
        f = address.fields
        return AddressDTO(
            id=address.id,  # type: ignore[arg-type]
            name=f.name,
            street=f.street,
            city=f.city,
            state=f.state,
            postal_code=f.postal_code,
            country=f.country,
            phone=f.phone,
            is_default=address.is_default,
        )


@dataclass(frozen=True)
class CartLineDTO:
    id: int
    product_id: int
    product_name: str
    color_id: int
    size_id: int
    quantity: int
    base_price: str
    discount_percentage: str
    final_price: str
    sub_total: str
    in_stock: int


@dataclass(frozen=True)
class CartSummaryDTO:
    total_items: int
    sub_total: str
    shipping_cost: str
    tax: str
    total: str


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    summary: CartSummaryDTO

    @staticmethod
    def from_view(view: CartView) -> CartDTO:
        totals = view.totals
        return CartDTO(
            items=[
                CartLineDTO(
                    id=line.line_id,
                    product_id=line.key.product_id,
                    product_name=line.product_name,
                    color_id=line.key.color_id,
                    size_id=line.key.size_id,
                    quantity=line.quantity,
                    base_price=str(line.base_price),
                    discount_percentage=f"{line.discount_percentage:g}%",
                    final_price=str(line.final_price),
                    sub_total=str(line.sub_total),
                    in_stock=line.in_stock,
                )
                for line in view.lines
            ],
            summary=CartSummaryDTO(
                total_items=totals.total_items,
                sub_total=str(totals.subtotal),
                shipping_cost=str(totals.shipping_cost),
                tax=str(totals.tax),
                total=str(totals.total),
            ),
        )


@dataclass(frozen=True)
class OrderLineDTO:
    product_id: int
    color_id: int
    size_id: int
    quantity: int
    price_per_unit: str
    sub_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    user_id: int
    address_id: int
    total_amount: str
    payment_method: str
    payment_status: str
    order_status: str
    items: list[OrderLineDTO]
    created_at: str

    @staticmethod
    def from_domain(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            user_id=order.user_id,
            address_id=order.address_id,
            total_amount=str(order.total_amount),
            payment_method=order.payment_method,
            payment_status=order.payment_status.value,
            order_status=order.order_status.value,
            items=[
                OrderLineDTO(
                    product_id=line.key.product_id,
                    color_id=line.key.color_id,
                    size_id=line.key.size_id,
                    quantity=line.quantity.value,
                    price_per_unit=str(line.unit_price),
                    sub_total=str(line.line_total),
                )
                for line in order.lines
            ],
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    base_price: str
    discount_percentage: str
    final_price: str

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            base_price=str(product.base_price),
            discount_percentage=f"{product.discount_percentage:g}%",
            final_price=str(product.final_price),
        )
