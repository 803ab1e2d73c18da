"""
Schema Capabilities - which optional product columns the deployed schema has.

A deployment may predate the migration adding `status`, `sold_at` or
`updated_at`; every product query is built against this snapshot instead of
assuming the latest schema.
"""

from typing import Iterable

import attrs


OPTIONAL_PRODUCT_COLUMNS = ('status', 'sold_at', 'updated_at')


@attrs.frozen
class SchemaCapabilities:
    has_status: bool = False
    has_sold_at: bool = False
    has_updated_at: bool = False
    resolved_at: float = 0.0  # time.monotonic() at resolution

    @classmethod
    def from_columns(cls, columns: Iterable[str], *, resolved_at: float) -> 'SchemaCapabilities':
        present = set(columns)
        return cls(
            has_status='status' in present,
            has_sold_at='sold_at' in present,
            has_updated_at='updated_at' in present,
            resolved_at=resolved_at,
        )

    def is_stale(self, *, now: float, ttl_seconds: float) -> bool:
        return ttl_seconds > 0 and now - self.resolved_at >= ttl_seconds
