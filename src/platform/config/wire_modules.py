"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.marketplace.app.command import (
    create_product_use_case,
    delete_product_use_case,
    register_seller_use_case,
    update_product_use_case,
    update_seller_profile_use_case,
)
from src.service.marketplace.app.query import (
    authenticate_seller_use_case,
    public_catalog_use_case,
    seller_product_query_use_case,
    seller_query_use_case,
)
from src.service.marketplace.driving_adapter.http_controller import seller_controller
from src.service.marketplace.driving_adapter.http_controller.auth import seller_auth


WIRE_MODULES: list[ModuleType] = [
    register_seller_use_case,
    update_seller_profile_use_case,
    create_product_use_case,
    update_product_use_case,
    delete_product_use_case,
    authenticate_seller_use_case,
    seller_query_use_case,
    seller_product_query_use_case,
    public_catalog_use_case,
    seller_controller,
    seller_auth,
]
