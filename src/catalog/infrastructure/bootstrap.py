"""Composition root: wires concrete implementations together.

This is the only place that knows where the seed data lives and which
order-number suppliers come pre-registered.
"""

from __future__ import annotations

import os
from pathlib import Path

from catalog.application.catalog_manager import CatalogManager
from catalog.domain.model.value_objects import MissingProductPolicy
from catalog.domain.service import order_numbers
from catalog.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from catalog.infrastructure.persistence.json_catalog_loader import load_products

DATA_FILE_ENV = "CATALOG_DATA_FILE"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_FILE = Path(__file__).resolve().parents[3] / "data" / "products.json"

DEFAULT_SUPPLIERS = {
    "sequential": order_numbers.sequential,
    "random": order_numbers.random_hex,
    "timestamp": order_numbers.timestamped,
}


def data_file(explicit: str | Path | None = None) -> Path:
    """Pick the seed file: explicit path, then $CATALOG_DATA_FILE, then the default."""
    if explicit:
        return Path(explicit)
    from_env = os.environ.get(DATA_FILE_ENV)
    if from_env:
        return Path(from_env)
    return _DEFAULT_DATA_FILE


def catalog_manager(
    file_path: str | Path | None = None,
    on_missing: MissingProductPolicy = MissingProductPolicy.SKIP,
) -> CatalogManager:
    manager = CatalogManager(
        product_repo=InMemoryProductRepository(load_products(data_file(file_path))),
        order_repo=InMemoryOrderRepository(),
        on_missing=on_missing,
    )
    for supplier_id, factory in DEFAULT_SUPPLIERS.items():
        manager.register_order_number_supplier(supplier_id, factory())
    return manager
