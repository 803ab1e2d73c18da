from unittest.mock import AsyncMock

from prometheus_client import REGISTRY
import pytest

from src.platform.exception.exceptions import InternalError, NotFoundError
from src.service.marketplace.app.command.delete_product_use_case import DeleteProductUseCase
from src.service.marketplace.domain.entity.product_entity import ProductEntity
from test.constants import MISSING_PRODUCT_ID, TEST_PRODUCT_ID, TEST_SELLER_ID


def _delete_mutations(result: str) -> float:
    value = REGISTRY.get_sample_value(
        'marketplace_product_mutations_total', {'operation': 'delete', 'result': result}
    )
    return value or 0.0


@pytest.fixture
def mock_product_query_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get_by_seller.return_value = ProductEntity(id=TEST_PRODUCT_ID, seller_id=TEST_SELLER_ID)
    return repo


@pytest.fixture
def mock_product_command_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.delete.return_value = True
    return repo


@pytest.fixture
def delete_product_use_case(
    mock_product_query_repo: AsyncMock, mock_product_command_repo: AsyncMock
) -> DeleteProductUseCase:
    return DeleteProductUseCase(
        product_query_repo=mock_product_query_repo,
        product_command_repo=mock_product_command_repo,
    )


@pytest.mark.unit
class TestDeleteProductUseCase:
    @pytest.mark.asyncio
    async def test_delete_owned_product(
        self, delete_product_use_case: DeleteProductUseCase, mock_product_command_repo: AsyncMock
    ) -> None:
        result = await delete_product_use_case.execute(
            product_id=TEST_PRODUCT_ID, seller_id=TEST_SELLER_ID
        )

        assert result is None
        mock_product_command_repo.delete.assert_awaited_once_with(
            product_id=TEST_PRODUCT_ID, seller_id=TEST_SELLER_ID
        )

    @pytest.mark.asyncio
    async def test_missing_or_foreign_product_not_deleted(
        self,
        delete_product_use_case: DeleteProductUseCase,
        mock_product_query_repo: AsyncMock,
        mock_product_command_repo: AsyncMock,
    ) -> None:
        mock_product_query_repo.get_by_seller.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await delete_product_use_case.execute(
                product_id=MISSING_PRODUCT_ID, seller_id=TEST_SELLER_ID
            )

        assert exc_info.value.message == 'Product not found or unauthorized'
        mock_product_command_repo.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_row_gone_before_delete(
        self, delete_product_use_case: DeleteProductUseCase, mock_product_command_repo: AsyncMock
    ) -> None:
        mock_product_command_repo.delete.return_value = False

        with pytest.raises(NotFoundError):
            await delete_product_use_case.execute(
                product_id=TEST_PRODUCT_ID, seller_id=TEST_SELLER_ID
            )

    @pytest.mark.asyncio
    async def test_repo_failure_counted_as_rejected(
        self, delete_product_use_case: DeleteProductUseCase, mock_product_command_repo: AsyncMock
    ) -> None:
        mock_product_command_repo.delete.side_effect = InternalError('Failed to delete product')
        rejected_before = _delete_mutations('rejected')
        success_before = _delete_mutations('success')

        with pytest.raises(InternalError):
            await delete_product_use_case.execute(
                product_id=TEST_PRODUCT_ID, seller_id=TEST_SELLER_ID
            )

        assert _delete_mutations('rejected') == rejected_before + 1
        assert _delete_mutations('success') == success_before
