"""
Database Models

Import all models here so they are registered on Base.metadata (Alembic reads it)
"""

from src.service.marketplace.driven_adapter.model.product_model import ProductModel
from src.service.marketplace.driven_adapter.model.seller_model import SellerModel

__all__ = [
    'ProductModel',
    'SellerModel',
]
