"""
Unit Tests for order status updates and order queries
"""

from unittest.mock import AsyncMock

import pytest

from storefront.core.domain import InvalidStatusException, OrderNotFoundException
from storefront.domains.ecommerce.application.use_cases import (
    GetAllOrdersUseCase,
    GetUserOrdersUseCase,
    UpdateOrderStatusUseCase,
)
from storefront.domains.ecommerce.domain import Order, OrderStatus


@pytest.fixture
def mock_order_repository():
    mock_repo = AsyncMock()
    mock_repo.update_status.return_value = True
    mock_repo.get_by_id.return_value = Order(id=3, user_id=1, status=OrderStatus.COMPLETED)
    mock_repo.get_by_user.return_value = [Order(id=4, user_id=1), Order(id=3, user_id=1)]
    mock_repo.get_all.return_value = [Order(id=5), Order(id=4, user_id=1)]
    return mock_repo


class TestUpdateOrderStatusUseCase:
    """Test cases for UpdateOrderStatusUseCase"""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_updates_and_returns_fresh_order(self, mock_order_repository):
        # Arrange
        use_case = UpdateOrderStatusUseCase(order_repository=mock_order_repository)

        # Act
        order = await use_case.execute(3, "completed")

        # Assert
        assert order.status == OrderStatus.COMPLETED
        mock_order_repository.update_status.assert_awaited_once_with(3, OrderStatus.COMPLETED)
        mock_order_repository.get_by_id.assert_awaited_once_with(3)

    @pytest.mark.unit
    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", ["shipped", "COMPLETED", "", None])
    async def test_invalid_status_writes_nothing(self, mock_order_repository, status):
        use_case = UpdateOrderStatusUseCase(order_repository=mock_order_repository)

        with pytest.raises(InvalidStatusException):
            await use_case.execute(3, status)

        mock_order_repository.update_status.assert_not_awaited()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_unknown_order(self, mock_order_repository):
        mock_order_repository.update_status.return_value = False
        use_case = UpdateOrderStatusUseCase(order_repository=mock_order_repository)

        with pytest.raises(OrderNotFoundException):
            await use_case.execute(999, "cancelled")

        mock_order_repository.get_by_id.assert_not_awaited()


class TestOrderQueries:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_user_orders(self, mock_order_repository):
        orders = await GetUserOrdersUseCase(order_repository=mock_order_repository).execute(1)

        assert [o.id for o in orders] == [4, 3]
        mock_order_repository.get_by_user.assert_awaited_once_with(1)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_all_orders(self, mock_order_repository):
        orders = await GetAllOrdersUseCase(order_repository=mock_order_repository).execute()

        assert orders[0].user_id is None
        assert len(orders) == 2
