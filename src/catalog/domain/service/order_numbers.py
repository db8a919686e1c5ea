"""Built-in order-number suppliers.

An order-number supplier is any zero-argument callable returning a string.
The catalog calls it every time a number is requested and never caches the
result.  Each factory below returns a fresh, independent supplier.
"""

from __future__ import annotations

import itertools
import uuid
from collections.abc import Callable
from datetime import datetime, timezone

OrderNumberSupplier = Callable[[], str]


def sequential(prefix: str = "ORD-", start: int = 1, width: int = 6) -> OrderNumberSupplier:
    """Zero-padded counter: ``ORD-000001``, ``ORD-000002``, ..."""
    counter = itertools.count(start)

    def supply() -> str:
        return f"{prefix}{next(counter):0{width}d}"

    return supply


def random_hex(prefix: str = "ORD-", length: int = 8) -> OrderNumberSupplier:
    """Random upper-case hex suffix taken from a UUID4."""
    if not 1 <= length <= 32:
        raise ValueError("length must be between 1 and 32")

    def supply() -> str:
        return f"{prefix}{uuid.uuid4().hex[:length].upper()}"

    return supply


def timestamped(prefix: str = "ORD-") -> OrderNumberSupplier:
    """UTC timestamp plus a per-supplier counter, e.g. ``ORD-20240101T120000-1``.

    The counter keeps numbers distinct when several are drawn within the
    same second.
    """
    counter = itertools.count(1)

    def supply() -> str:
        stamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        return f"{prefix}{stamp}-{next(counter)}"

    return supply
