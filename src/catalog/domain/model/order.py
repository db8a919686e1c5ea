"""Order aggregate.

An order maps product instances to aggregated quantities and carries a
total computed once, at creation.  The total is a point-in-time snapshot:
changing a product's price afterwards, or replacing the product in the
catalog, does not touch orders already recorded.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from catalog.domain.model.product import Product


@dataclass(frozen=True, eq=False)
class Order:
    """Immutable record of a processed order.

    Use ``Order.create()`` to build one from raw ``(product, quantity)``
    pairs; it does the aggregation and the total.  Line items reference the
    catalog's own product instances and are exposed read-only.
    """

    order_id: str
    line_items: Mapping[Product, int]
    total_amount: float

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(order_id: str, lines: Iterable[tuple[Product, int]]) -> Order:
        """Aggregate quantities per product and snapshot the total.

        A product seen more than once has its quantities summed.  An empty
        ``lines`` gives an order with no line items and a zero total.
        """
        quantities: dict[Product, int] = {}
        for product, quantity in lines:
            if product in quantities:
                quantities[product] += quantity
            else:
                quantities[product] = quantity

        total = sum(
            (product.price * quantity for product, quantity in quantities.items()),
            0.0,
        )
        return Order(
            order_id=order_id,
            line_items=MappingProxyType(quantities),
            total_amount=total,
        )

    # --- Computed properties --------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.line_items

    @property
    def item_count(self) -> int:
        """Total number of units across all line items."""
        return sum(self.line_items.values())

    def quantity_of(self, product_id: str) -> int:
        """Aggregated quantity for a product id, 0 if it is not in the order."""
        return sum(
            quantity
            for product, quantity in self.line_items.items()
            if product.id == product_id
        )

    # --- Display --------------------------------------------------------------

    def describe_lines(self) -> Iterator[str]:
        for product, quantity in self.line_items.items():
            yield f"{product.id} ({product.category}) x {quantity} @ {product.price:.2f}"
