"""Tests for CatalogManager.process_order and the order history."""

import logging

import pytest

from catalog.application.catalog_manager import CatalogManager
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import MissingProductPolicy
from catalog.domain.service.stock_policies import decrement_stock
from catalog.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)

LOGGER = "catalog.application.catalog_manager"


def _manager(**kwargs) -> CatalogManager:
    return CatalogManager(InMemoryProductRepository(), InMemoryOrderRepository(), **kwargs)


class RecordingPolicy:
    """Stock policy that decrements and remembers every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, int]] = []

    def __call__(self, product: Product, quantity: int) -> None:
        self.calls.append((product.id, quantity))
        product.stock_quantity -= quantity


def _setup(on_missing: MissingProductPolicy = MissingProductPolicy.SKIP) -> CatalogManager:
    manager = _manager(on_missing=on_missing)
    manager.add_product(Product(id="P1", price=10.0, category="tools", stock_quantity=10))
    manager.add_product(Product(id="P3", price=2.5, category="garden", stock_quantity=4))
    return manager


class TestProcessOrderHappyPath:

    def test_total_and_stock(self):
        manager = _setup()
        order = manager.process_order("O-1", {"P1": 2, "P3": 4}, decrement_stock)

        assert order.order_id == "O-1"
        assert order.total_amount == 30.0
        assert manager.get_product_by_id("P1").stock_quantity == 8
        assert manager.get_product_by_id("P3").stock_quantity == 0

    def test_line_items_are_catalog_instances(self):
        manager = _setup()
        order = manager.process_order("O-1", {"P1": 2}, decrement_stock)
        assert dict(order.line_items) == {manager.get_product_by_id("P1"): 2}

    def test_policy_called_in_item_order(self):
        manager = _setup()
        policy = RecordingPolicy()
        manager.process_order("O-1", {"P3": 1, "P1": 2}, policy)
        assert policy.calls == [("P3", 1), ("P1", 2)]


class TestProcessOrderMissingProducts:

    def test_missing_product_is_skipped(self):
        manager = _manager()
        manager.add_product(Product(id="P1", price=10.0, category="tools"))
        policy = RecordingPolicy()

        order = manager.process_order("O-1", {"P1": 2, "P2": 3}, policy)

        assert [(p.id, q) for p, q in order.line_items.items()] == [("P1", 2)]
        assert order.total_amount == 20.0
        assert policy.calls == [("P1", 2)]

    def test_all_missing_still_records_empty_order(self):
        manager = _setup()
        policy = RecordingPolicy()
        order = manager.process_order("O-1", {"nope": 1}, policy)

        assert order.is_empty
        assert order.total_amount == 0.0
        assert policy.calls == []
        assert manager.orders == (order,)

    def test_abort_raises_before_touching_stock(self):
        manager = _setup(on_missing=MissingProductPolicy.ABORT)
        policy = RecordingPolicy()

        with pytest.raises(EntityNotFoundError, match="nope"):
            manager.process_order("O-1", {"P1": 2, "nope": 1}, policy)

        assert policy.calls == []
        assert manager.get_product_by_id("P1").stock_quantity == 10
        assert manager.orders == ()

    def test_per_call_policy_overrides_default(self):
        manager = _setup(on_missing=MissingProductPolicy.ABORT)
        order = manager.process_order(
            "O-1", {"P1": 1, "nope": 1}, decrement_stock,
            on_missing=MissingProductPolicy.SKIP,
        )
        assert order.total_amount == 10.0


class TestProcessOrderPermissive:

    def test_negative_quantity_accepted(self):
        manager = _setup()
        order = manager.process_order("O-1", {"P1": -2}, decrement_stock)
        assert order.total_amount == -20.0
        assert manager.get_product_by_id("P1").stock_quantity == 12

    def test_duplicate_order_ids_accepted(self):
        manager = _setup()
        manager.process_order("O-1", {"P1": 1}, decrement_stock)
        manager.process_order("O-1", {"P1": 1}, decrement_stock)
        assert [o.order_id for o in manager.orders] == ["O-1", "O-1"]


class TestOrderHistory:

    def test_history_is_in_call_order(self):
        manager = _setup()
        ids = [f"O-{i}" for i in range(5)]
        for i, order_id in enumerate(ids):
            items = {"P1": 1} if i % 2 == 0 else {}
            manager.process_order(order_id, items, decrement_stock)

        assert [o.order_id for o in manager.orders] == ids
        assert manager.orders[1].is_empty

    def test_history_snapshot_is_not_writable(self):
        manager = _setup()
        manager.process_order("O-1", {"P1": 1}, decrement_stock)
        history = manager.orders
        assert isinstance(history, tuple)
        manager.process_order("O-2", {"P1": 1}, decrement_stock)
        assert len(history) == 1
        assert len(manager.orders) == 2

    def test_total_is_snapshot_after_price_change(self):
        manager = _setup()
        order = manager.process_order("O-1", {"P1": 2}, decrement_stock)
        manager.get_product_by_id("P1").price = 50.0
        assert order.total_amount == 20.0

    def test_replacing_product_leaves_old_orders_alone(self):
        manager = _setup()
        order = manager.process_order("O-1", {"P1": 2}, decrement_stock)
        original = manager.get_product_by_id("P1")

        manager.add_product(Product(id="P1", price=99.0, category="tools"))

        assert next(iter(order.line_items)) is original
        assert order.total_amount == 20.0


class TestProcessOrderReporting:

    def test_summary_is_logged(self, caplog):
        manager = _setup()
        with caplog.at_level(logging.INFO, logger=LOGGER):
            manager.process_order("O-1", {"P1": 2}, decrement_stock)

        assert "Order processed successfully. Order ID: O-1" in caplog.text
        assert "P1 (tools) x 2 @ 10.00" in caplog.text
        assert "Total Amount: 20.00" in caplog.text


class TestProcessOrderLineByLine:

    def test_policy_changes_are_seen_by_later_lines(self):
        manager = _setup()

        def restock_p2(product, quantity):
            product.stock_quantity -= quantity
            if product.id == "P1":
                manager.add_product(Product(id="P2", price=1.0, category="tools"))

        order = manager.process_order("O-1", {"P1": 1, "P2": 2}, restock_p2)

        assert [p.id for p in order.line_items] == ["P1", "P2"]
        assert order.total_amount == 12.0

    def test_stock_report_precedes_next_line(self, caplog):
        manager = _setup()
        with caplog.at_level(logging.INFO, logger=LOGGER):
            manager.process_order("O-1", {"P3": 1, "P1": 2}, decrement_stock)

        updates = [r.getMessage() for r in caplog.records if "Stock updated" in r.getMessage()]
        assert updates == [
            "Stock updated successfully: P3 (stock now 3)",
            "Stock updated successfully: P1 (stock now 8)",
        ]

    def test_skipped_line_goes_to_injected_reporter(self, caplog):
        manager = _manager(reporter=logging.getLogger("tests.orders"))
        manager.add_product(Product(id="P1", price=10.0, category="tools"))
        with caplog.at_level(logging.DEBUG, logger="tests.orders"):
            manager.process_order("O-1", {"P1": 1, "nope": 1}, decrement_stock)

        skipped = [r for r in caplog.records if "skipping unknown product nope" in r.getMessage()]
        assert [r.name for r in skipped] == ["tests.orders"]
