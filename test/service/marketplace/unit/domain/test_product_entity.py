import pytest

from src.platform.exception.exceptions import InvalidInputError
from src.service.marketplace.domain.entity.product_entity import (
    REQUIRED_FIELDS_MESSAGE,
    ProductEntity,
)
from test.constants import VALID_IMAGE


MAX_BYTES = 2 * 1024 * 1024


@pytest.mark.unit
class TestValidateRequiredFields:
    @pytest.mark.parametrize(
        'missing',
        ['name', 'price', 'description', 'image'],
    )
    def test_missing_field_rejected(self, missing: str) -> None:
        fields = {'name': 'Jacket', 'price': 10.0, 'description': 'Warm', 'image': VALID_IMAGE}
        fields[missing] = None

        with pytest.raises(InvalidInputError) as exc_info:
            ProductEntity.validate_required_fields(**fields)

        assert exc_info.value.message == REQUIRED_FIELDS_MESSAGE

    def test_zero_price_counts_as_missing(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            ProductEntity.validate_required_fields(
                name='Jacket', price=0, description='Warm', image=VALID_IMAGE
            )

        assert exc_info.value.message == REQUIRED_FIELDS_MESSAGE

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            ProductEntity.validate_required_fields(
                name='Jacket', price=-5, description='Warm', image=VALID_IMAGE
            )

        assert exc_info.value.message == 'Price must be a positive number'


@pytest.mark.unit
class TestValidateImageDataUri:
    def test_valid_data_uri_passes(self) -> None:
        ProductEntity.validate_image_data_uri(VALID_IMAGE, max_bytes=MAX_BYTES)

    def test_plain_url_rejected_with_prefix_message(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            ProductEntity.validate_image_data_uri(
                'https://example.com/a.png', max_bytes=MAX_BYTES
            )

        assert exc_info.value.message.startswith('Invalid image format')

    def test_malformed_data_uri_rejected(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            ProductEntity.validate_image_data_uri('data:image/png,notbase64', max_bytes=MAX_BYTES)

        assert exc_info.value.message == 'Invalid image data URL format'

    def test_oversized_image_rejected(self) -> None:
        payload = 'A' * (MAX_BYTES * 2)
        image = f'data:image/png;base64,{payload}'

        with pytest.raises(InvalidInputError) as exc_info:
            ProductEntity.validate_image_data_uri(image, max_bytes=MAX_BYTES)

        assert exc_info.value.message == 'Image size exceeds 2MB limit'
