"""Application service: the catalog manager.

Owns the product store, the registered order-number suppliers and the order
history, and exposes every catalog operation.  Stock policies, suppliers,
predicates and value functions are all supplied by the caller as plain
callables.

Nothing here writes to the console.  Status lines for stock updates and
order summaries go to the injected ``logging.Logger`` (the reporting
channel), which defaults to this module's logger.

Not-found conditions are returned, never raised, unless the caller asks for
``MissingProductPolicy.ABORT`` when processing an order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.order import Order
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import (
    MissingProductPolicy,
    OrderNumber,
    StockUpdateOutcome,
)
from catalog.domain.repository.order_repository import OrderRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.order_numbers import OrderNumberSupplier
from catalog.domain.service.stock_policies import StockUpdatePolicy

logger = logging.getLogger(__name__)


class CatalogManager:

    def __init__(
        self,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
        reporter: logging.Logger | None = None,
        on_missing: MissingProductPolicy = MissingProductPolicy.SKIP,
    ) -> None:
        self._product_repo = product_repo
        self._order_repo = order_repo
        self._order_number_suppliers: dict[str, OrderNumberSupplier] = {}
        self._reporter = reporter if reporter is not None else logger
        self._on_missing = on_missing

    # --- Registration ---------------------------------------------------------

    def add_product(self, product: Product) -> None:
        """Insert a product, silently replacing any product with the same id.

        Orders already holding the replaced instance keep it.
        """
        self._product_repo.save(product)

    def get_product_by_id(self, product_id: str) -> Product | None:
        return self._product_repo.get_by_id(product_id)

    @property
    def products(self) -> list[Product]:
        return self._product_repo.list_all()

    # --- Queries --------------------------------------------------------------

    def filter_products(self, predicate: Callable[[Product], bool]) -> list[Product]:
        return [p for p in self._product_repo.list_all() if predicate(p)]

    def get_active_products_sorted_by_price(self) -> list[Product]:
        # sorted() is stable, so equal prices keep insertion order.
        return sorted(
            (p for p in self._product_repo.list_all() if p.is_active),
            key=lambda p: p.price,
        )

    def calculate_average_price_in_category(self, category: str) -> float:
        prices = [p.price for p in self._product_repo.list_all() if p.category == category]
        if not prices:
            return 0.0
        return sum(prices) / len(prices)

    def get_category_price_sum(self) -> dict[str, float]:
        sums: dict[str, float] = {}
        for p in self._product_repo.list_all():
            sums[p.category] = sums.get(p.category, 0.0) + p.price
        return sums

    def calculate_total_value(self, value_function: Callable[[Product], float]) -> float:
        """Sum ``value_function(product)`` over the whole catalog.

        e.g. ``lambda p: p.price * p.stock_quantity`` for inventory value.
        """
        return sum((value_function(p) for p in self._product_repo.list_all()), 0.0)

    # --- Stock ----------------------------------------------------------------

    def update_stock(
        self,
        product_id: str,
        quantity: int,
        update_policy: StockUpdatePolicy,
    ) -> StockUpdateOutcome:
        """Apply *update_policy* to the product, if it exists.

        The policy decides what *quantity* means and mutates the stock
        itself.  Errors raised by the policy propagate to the caller.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            self._reporter.warning("Product not found: %s", product_id)
            return StockUpdateOutcome.NOT_FOUND

        update_policy(product, quantity)
        self._reporter.info(
            "Stock updated successfully: %s (stock now %s)",
            product_id,
            product.stock_quantity,
        )
        return StockUpdateOutcome.UPDATED

    # --- Order numbers --------------------------------------------------------

    def register_order_number_supplier(
        self, supplier_id: str, supplier: OrderNumberSupplier
    ) -> None:
        self._order_number_suppliers[supplier_id] = supplier

    def generate_order_number(self, supplier_id: str) -> OrderNumber:
        """Draw a fresh number from the supplier registered as *supplier_id*.

        The supplier is called every time.  An unknown id gives a not-found
        result instead of an error.  A registered supplier that returns
        ``None`` is broken and raises ``ValidationError``, so it can never pass
        for an unregistered one.
        """
        supplier = self._order_number_suppliers.get(supplier_id)
        if supplier is None:
            return OrderNumber.missing(supplier_id)
        value = supplier()
        if value is None:
            raise ValidationError(
                f"Order-number supplier '{supplier_id}' returned no order number"
            )
        return OrderNumber.of(supplier_id, value)

    # --- Orders ---------------------------------------------------------------

    def process_order(
        self,
        order_id: str,
        order_items: Mapping[str, int],
        stock_update_policy: StockUpdatePolicy,
        on_missing: MissingProductPolicy | None = None,
    ) -> Order:
        """Apply stock changes for each line, then record and return the order.

        Lines are handled one at a time in the mapping's iteration order:
        look up the product, apply the stock policy, add the line.  A policy
        that changes the catalog therefore affects the lines after it.  With
        ``MissingProductPolicy.SKIP`` unknown product ids are dropped and the
        rest of the order goes through, so an order can end up with no line
        items at all; it is still recorded.  With ``ABORT`` every id is
        checked first and ``EntityNotFoundError`` is raised before any stock
        is touched.
        """
        policy = on_missing if on_missing is not None else self._on_missing

        if policy is MissingProductPolicy.ABORT:
            for product_id in order_items:
                if self._product_repo.get_by_id(product_id) is None:
                    raise EntityNotFoundError(
                        f"Order '{order_id}' references unknown product '{product_id}'"
                    )

        lines: list[tuple[Product, int]] = []
        for product_id, quantity in order_items.items():
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                self._reporter.debug(
                    "Order %s: skipping unknown product %s", order_id, product_id
                )
                continue
            self.update_stock(product_id, quantity, stock_update_policy)
            lines.append((product, quantity))

        order = Order.create(order_id, lines)
        self._order_repo.append(order)
        self._report_order(order)
        return order

    @property
    def orders(self) -> tuple[Order, ...]:
        return tuple(self._order_repo.list_all())

    # --- Internal helpers -----------------------------------------------------

    def _report_order(self, order: Order) -> None:
        self._reporter.info("Order processed successfully. Order ID: %s", order.order_id)
        self._reporter.info("Ordered products:")
        for line in order.describe_lines():
            self._reporter.info("  %s", line)
        self._reporter.info("Total Amount: %.2f", order.total_amount)
