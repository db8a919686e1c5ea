"""Built-in stock-update policies.

A stock-update policy is any callable taking ``(product, quantity)`` that
decides what the quantity means and mutates ``product.stock_quantity``
itself.  The catalog never interprets the quantity.  These are the common
cases; embedders are free to pass their own.

No policy here validates its input: a negative quantity or a stock level
going below zero is accepted as given.
"""

from __future__ import annotations

from collections.abc import Callable

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product

StockUpdatePolicy = Callable[[Product, int], None]


def increment_stock(product: Product, quantity: int) -> None:
    """Receive goods: add *quantity* to the stock level."""
    product.stock_quantity += quantity


def decrement_stock(product: Product, quantity: int) -> None:
    """Sell goods: remove *quantity* from the stock level."""
    product.stock_quantity -= quantity


def set_stock(product: Product, quantity: int) -> None:
    """Stock count: overwrite the stock level with *quantity*."""
    product.stock_quantity = quantity


def reject_stock_change(product: Product, quantity: int) -> None:
    """Leave the stock level untouched."""


POLICIES: dict[str, StockUpdatePolicy] = {
    "increment": increment_stock,
    "decrement": decrement_stock,
    "set": set_stock,
    "reject": reject_stock_change,
}


def policy_by_name(name: str) -> StockUpdatePolicy:
    try:
        return POLICIES[name.lower()]
    except KeyError:
        raise ValidationError(
            f"Unknown stock policy '{name}' "
            f"(expected one of: {', '.join(sorted(POLICIES))})"
        ) from None
