"""List-backed, append-only implementation of OrderRepository."""

from __future__ import annotations

from catalog.domain.model.order import Order
from catalog.domain.repository.order_repository import OrderRepository


class InMemoryOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._history: list[Order] = []

    def append(self, order: Order) -> None:
        self._history.append(order)

    def list_all(self) -> list[Order]:
        return list(self._history)

    def __len__(self) -> int:
        return len(self._history)
