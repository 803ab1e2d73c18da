from datetime import datetime
import re
from typing import Optional

import attrs

from src.platform.exception.exceptions import InvalidInputError
from src.service.marketplace.domain.enum.product_status import ProductStatus


IMAGE_DATA_URI_PREFIX = 'data:image/'
IMAGE_DATA_URI_PATTERN = re.compile(r'^data:image/([A-Za-z\-+/]+);base64,(.+)$')

# Shared by every owner-scoped lookup: "missing" and "someone else's" look the same
PRODUCT_NOT_FOUND_MESSAGE = 'Product not found or unauthorized'
REQUIRED_FIELDS_MESSAGE = 'Name, price, description, and image are required'


@attrs.define
class ProductEntity:
    name: str = ''
    price: float = 0.0
    description: str = ''
    image_url: str = attrs.field(default='', repr=False)  # data URIs run to megabytes
    aesthetic: str = ''
    seller_id: Optional[int] = None
    id: Optional[int] = None
    status: str = ProductStatus.AVAILABLE.value
    sold_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Joined seller info (public reads only)
    seller_name: Optional[str] = None
    seller_phone: Optional[str] = None
    seller_email: Optional[str] = None

    @staticmethod
    def validate_required_fields(
        *,
        name: Optional[str],
        price: Optional[float],
        description: Optional[str],
        image: Optional[str],
    ) -> None:
        if not name or not price or not description or not image:
            raise InvalidInputError(REQUIRED_FIELDS_MESSAGE)

        if price < 0:
            raise InvalidInputError('Price must be a positive number')

    @staticmethod
    def validate_image_data_uri(image: str, *, max_bytes: int) -> None:
        if not image.startswith(IMAGE_DATA_URI_PREFIX):
            raise InvalidInputError(
                'Invalid image format. Must be a data URL starting with data:image/'
            )

        if not IMAGE_DATA_URI_PATTERN.match(image):
            raise InvalidInputError('Invalid image data URL format')

        # base64 carries 3 bytes per 4 characters
        estimated_size = len(image) * 0.75
        if estimated_size > max_bytes:
            raise InvalidInputError(f'Image size exceeds {max_bytes // (1024 * 1024)}MB limit')
