"""
Product Update Domain Service

Turns a partial update request into the ordered list of column assignments
to write, including the status/sold-state derivation:

- soldAt supplied (even as null): sold_at and status are written together,
  status = 'sold' when soldAt is set, 'available' when it is null.
- status supplied without soldAt: status alone is written, sold_at untouched.
  Setting 'sold' this way does NOT populate sold_at; callers relying on the
  pairing must send soldAt.
- Both rules apply only when the deployed schema has a sold_at column.

Fields that were not supplied are never written (partial update, not replace).
"""

from datetime import datetime
from typing import Any, Optional

import attrs

from src.service.marketplace.domain.enum.product_status import ProductStatus
from src.service.marketplace.domain.value_object.schema_capabilities import SchemaCapabilities


# Written in this order when present; status is handled separately below
STANDARD_COLUMNS = ('name', 'price', 'description', 'image_url', 'aesthetic')


@attrs.frozen
class ProductChangeSet:
    name: Optional[str] = None
    price: Optional[float] = None
    description: Optional[str] = None
    image_url: Optional[str] = attrs.field(default=None, repr=False)
    aesthetic: Optional[str] = None
    status: Optional[str] = None
    sold_at: Optional[datetime] = None
    sold_at_provided: bool = False  # distinguishes explicit null from absent


def derive_status_from_sold_at(sold_at: Optional[datetime]) -> ProductStatus:
    return ProductStatus.SOLD if sold_at else ProductStatus.AVAILABLE


def build_update_assignments(
    *, change_set: ProductChangeSet, capabilities: SchemaCapabilities
) -> list[tuple[str, Any]]:
    assignments: list[tuple[str, Any]] = []

    for column in STANDARD_COLUMNS:
        value = getattr(change_set, column)
        if value is None:
            continue
        if column == 'price':
            value = float(value)
        assignments.append((column, value))

    if capabilities.has_sold_at:
        if change_set.sold_at_provided:
            assignments.append(('sold_at', change_set.sold_at))
            assignments.append(('status', derive_status_from_sold_at(change_set.sold_at).value))
        elif change_set.status:
            assignments.append(('status', change_set.status))

    return assignments
