"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry formatted data to the CLI without handing it live Product
instances it could mutate.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.model.order import Order
from catalog.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    id: str
    category: str
    status: str
    price: str  # formatted, e.g. "15.00"
    stock_quantity: int

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            category=product.category,
            status=product.status.value,
            price=f"{product.price:.2f}",
            stock_quantity=product.stock_quantity,
        )


@dataclass(frozen=True)
class OrderLineDTO:
    product_id: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """A processed order as displayed to the user.

    Unit prices are read from the products at display time; ``total`` is the
    order's own snapshot, so the two can disagree after a price change.
    """

    order_id: str
    items: list[OrderLineDTO]
    total: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            order_id=order.order_id,
            items=[
                OrderLineDTO(
                    product_id=product.id,
                    quantity=quantity,
                    unit_price=f"{product.price:.2f}",
                    line_total=f"{product.price * quantity:.2f}",
                )
                for product, quantity in order.line_items.items()
            ],
            total=f"{order.total_amount:.2f}",
        )
