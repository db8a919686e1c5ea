"""Abstract repository for the Product store.

Defined in the domain layer so the catalog never depends on a concrete
store.  The only implementation shipped is in-memory; the abstraction is
what lets an embedder hand the manager a store it already owns.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product, in insertion order."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Insert a product, replacing any product with the same ID."""
