"""Product aggregate.

Products are created by the embedder and handed to the catalog.  Stock is
the only field the catalog ever changes, and only through a caller-supplied
stock-update policy.
"""

from __future__ import annotations

from enum import Enum


class ProductStatus(Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    DISCONTINUED = "DISCONTINUED"


class Product:
    """A product in the catalog.

    Equality and hashing are by identity: an order aggregates quantities per
    product *instance*, so a replacement product with the same id is a
    different line-item key.  ``id`` is read-only; everything else is a
    plain mutable attribute.
    """

    __slots__ = ("_id", "price", "category", "status", "stock_quantity")

    def __init__(
        self,
        id: str,
        price: float,
        category: str,
        status: ProductStatus = ProductStatus.ACTIVE,
        stock_quantity: int = 0,
    ) -> None:
        self._id = id
        self.price = price
        self.category = category
        self.status = status
        self.stock_quantity = stock_quantity

    @property
    def id(self) -> str:
        return self._id

    @property
    def is_active(self) -> bool:
        return self.status is ProductStatus.ACTIVE

    def __repr__(self) -> str:
        return (
            f"Product(id={self._id!r}, price={self.price!r}, "
            f"category={self.category!r}, status={self.status.value}, "
            f"stock_quantity={self.stock_quantity!r})"
        )

    def __str__(self) -> str:
        return f"{self._id} [{self.category}] {self.price:.2f}"
