"""Domain service: Availability Resolver.

Derives a product's effective status from its own fields, the current
hold set and the clock. The storefront listing, the product page and the
admin table all go through ``resolve_status``; nothing here writes.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from enum import Enum

from gearstore.domain.model.hold import Hold
from gearstore.domain.model.product import Product


class ProductAvailability(Enum):
    ACTIVE = "Active"
    ON_HOLD = "On Hold"
    SOLD = "Sold"


def blocking_hold(product_id: str, holds: Iterable[Hold], now: datetime) -> Hold | None:
    """Return the hold currently reserving the product, if any.

    A hold blocks when its status is exactly "Active" (case-sensitive) and
    it has no expiration or expires after ``now``.
    """
    for hold in holds:
        if hold.covers(product_id) and hold.is_blocking(now):
            return hold
    return None


def resolve_status(
    product: Product, holds: Iterable[Hold], now: datetime
) -> ProductAvailability:
    if product.is_sold:
        return ProductAvailability.SOLD
    if blocking_hold(product.id, holds, now) is not None:
        return ProductAvailability.ON_HOLD
    return ProductAvailability.ACTIVE
