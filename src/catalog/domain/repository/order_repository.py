"""Abstract repository for the order history."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def append(self, order: Order) -> None:
        """Record a processed order at the end of the history."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return the history in the order it was recorded."""
