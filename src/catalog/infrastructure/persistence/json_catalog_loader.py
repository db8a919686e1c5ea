"""Read-only loader for a JSON product seed file.

The file is a JSON array of product records::

    [
      {"id": "P1", "price": "10.00", "category": "tools",
       "status": "ACTIVE", "stock_quantity": 5}
    ]

``status`` defaults to ACTIVE and ``stock_quantity`` to 0.  The catalog
lives in memory only, so nothing is ever written back to the file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product, ProductStatus

logger = logging.getLogger(__name__)


def load_products(file_path: Path) -> list[Product]:
    """Parse *file_path* into products.  A missing file is an empty catalog."""
    if not file_path.exists():
        logger.info("No catalog file at %s, starting empty", file_path)
        return []

    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ValidationError(f"Catalog file {file_path} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Catalog file {file_path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, list):
        raise ValidationError(f"Catalog file {file_path} must contain a JSON array")

    products = [_to_product(index, item) for index, item in enumerate(raw)]
    logger.info("Loaded %d products from %s", len(products), file_path)
    return products


def _to_product(index: int, item: Any) -> Product:
    if not isinstance(item, dict):
        raise ValidationError(f"Record #{index} is not an object")

    missing = [key for key in ("id", "price", "category") if key not in item]
    if missing:
        raise ValidationError(f"Record #{index} is missing {', '.join(missing)}")

    try:
        price = float(item["price"])
        stock = _whole_number(item.get("stock_quantity", 0))
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Record #{index} ({item['id']!r}) has a bad number: {exc}") from exc

    try:
        status = ProductStatus(str(item.get("status", "ACTIVE")).upper())
    except ValueError:
        raise ValidationError(
            f"Record #{index} ({item['id']!r}) has unknown status {item['status']!r}"
        ) from None

    return Product(
        id=str(item["id"]),
        price=price,
        category=str(item["category"]),
        status=status,
        stock_quantity=stock,
    )


def _whole_number(value: Any) -> int:
    """``int()`` that refuses to drop a fractional part (2.7 is an error, 2.0 is 2)."""
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"{value!r} is not a whole number")
    return int(value)
