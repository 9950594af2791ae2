"""Integration tests for the UpdateOrderStatus use case."""

import pytest

from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import OrderItemSpec
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.order import OrderStatus
from tests.fakes import make_product, make_session, make_user


def _setup():
    uow, repo = make_session(users=[make_user(1)], products=[make_product(1, stock=5)])
    order = CreateOrderHandler(uow).handle(1, [OrderItemSpec(1, 3)])
    return UpdateOrderStatusHandler(uow), repo, order


class TestUpdateOrderStatus:

    def test_stores_new_status(self):
        handler, repo, order = _setup()

        updated = handler.handle(order.id, "processing")

        assert updated.status == OrderStatus.PROCESSING
        assert repo.document.get_order(order.id).status == OrderStatus.PROCESSING

    def test_transitions_are_not_restricted(self):
        handler, repo, order = _setup()
        for status in ["completed", "pending", "cancelled", "processing", "completed"]:
            handler.handle(order.id, status)
            assert repo.document.get_order(order.id).status.value == status

    def test_status_changes_never_touch_stock(self):
        handler, repo, order = _setup()
        for status in ["processing", "cancelled", "pending", "completed"]:
            handler.handle(order.id, status)
            assert repo.stock_of(1) == 2

    def test_invalid_status_rejected(self):
        handler, repo, order = _setup()

        with pytest.raises(ValidationError, match="Invalid status"):
            handler.handle(order.id, "shipped")

        assert repo.document.get_order(order.id).status == OrderStatus.PENDING

    def test_missing_status_rejected(self):
        handler, _, order = _setup()
        with pytest.raises(ValidationError):
            handler.handle(order.id, None)

    def test_unknown_order_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Order #7 not found"):
            handler.handle(7, "completed")
