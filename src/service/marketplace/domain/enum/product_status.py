"""
Product Status Enum - Domain Value Object
"""

from enum import StrEnum


class ProductStatus(StrEnum):
    """Lifecycle of a listing; `sold_at` is set iff SOLD when driven by soldAt"""

    AVAILABLE = 'available'
    SOLD = 'sold'


# Literal reported when the products table has no status column.
# Seller-facing reads and public reads historically disagree; both are kept.
SELLER_VIEW_STATUS_FALLBACK = 'published'
PUBLIC_VIEW_STATUS_FALLBACK = ProductStatus.AVAILABLE.value
