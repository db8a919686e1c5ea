"""Value Objects shared across the domain.

Small immutable results and switches.  They replace ad-hoc sentinels so a
caller can always tell "found" from "not found" without comparing strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from catalog.domain.exceptions import EntityNotFoundError

SUPPLIER_NOT_FOUND = "Supplier not found"


class StockUpdateOutcome(Enum):
    UPDATED = "UPDATED"
    NOT_FOUND = "NOT_FOUND"

    def __bool__(self) -> bool:
        return self is StockUpdateOutcome.UPDATED


class MissingProductPolicy(Enum):
    """What order processing does with a line item whose product is unknown."""

    SKIP = "SKIP"  # drop the line, keep processing
    ABORT = "ABORT"  # raise before any stock changes


@dataclass(frozen=True)
class OrderNumber:
    """Result of asking a registered supplier for an order number.

    ``value`` is ``None`` when no supplier is registered under
    ``supplier_id``.  ``str()`` keeps the historical sentinel text for
    display, but code should branch on ``found``.
    """

    supplier_id: str
    value: str | None

    @property
    def found(self) -> bool:
        return self.value is not None

    def unwrap(self) -> str:
        if self.value is None:
            raise EntityNotFoundError(
                f"No order-number supplier registered as '{self.supplier_id}'"
            )
        return self.value

    def value_or(self, default: str) -> str:
        return default if self.value is None else self.value

    def __bool__(self) -> bool:
        return self.found

    def __str__(self) -> str:
        return self.value_or(SUPPLIER_NOT_FOUND)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(supplier_id: str, value: str) -> OrderNumber:
        return OrderNumber(supplier_id=supplier_id, value=value)

    @staticmethod
    def missing(supplier_id: str) -> OrderNumber:
        return OrderNumber(supplier_id=supplier_id, value=None)
