"""Unit tests for the Order aggregate and its business rules."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order, OrderLineItem, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity
from tests.fakes import make_product


class TestOrderCreation:

    def test_happy_path(self):
        order = Order.create(user_id=1, reserved=[(make_product(1, price="10.00"), 3)])
        assert order.id is None  # assigned by the entity store
        assert order.user_id == 1
        assert order.status == OrderStatus.PENDING
        assert order.items == [OrderLineItem(product_id=1, quantity=Quantity(3))]
        assert order.total == Money.of("30.00")

    def test_total_is_sum_of_line_items(self):
        order = Order.create(
            user_id=1,
            reserved=[
                (make_product(1, price="15.00"), 3),
                (make_product(2, price="25.00"), 5),
            ],
        )
        assert order.total == Money.of("170.00")

    def test_total_rounded_to_two_decimals(self):
        order = Order.create(user_id=1, reserved=[(make_product(1, price="0.333"), 3)])
        assert str(order.total.amount) == "1.00"

    def test_total_is_fixed_when_price_changes_later(self):
        product = make_product(1, price="10.00")
        order = Order.create(user_id=1, reserved=[(product, 2)])

        product.update_price(Money.of("99.99"))

        assert order.total == Money.of("20.00")

    def test_no_items_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            Order.create(user_id=1, reserved=[])


class TestOrderStatus:

    def test_parse_valid_values(self):
        assert OrderStatus.parse("pending") is OrderStatus.PENDING
        assert OrderStatus.parse("processing") is OrderStatus.PROCESSING
        assert OrderStatus.parse("completed") is OrderStatus.COMPLETED
        assert OrderStatus.parse("cancelled") is OrderStatus.CANCELLED

    @pytest.mark.parametrize("raw", ["shipped", "PENDING", "", None])
    def test_parse_rejects_anything_else(self, raw):
        with pytest.raises(ValidationError, match="Invalid status"):
            OrderStatus.parse(raw)

    def test_any_status_may_replace_any_other(self):
        order = Order.create(user_id=1, reserved=[(make_product(1), 1)])
        for target in [
            OrderStatus.COMPLETED,
            OrderStatus.PENDING,
            OrderStatus.CANCELLED,
            OrderStatus.PROCESSING,
            OrderStatus.PENDING,
        ]:
            order.change_status(target)
            assert order.status == target

    def test_only_pending_holds_reservation(self):
        order = Order.create(user_id=1, reserved=[(make_product(1), 1)])
        assert order.holds_reservation
        for status in (OrderStatus.PROCESSING, OrderStatus.COMPLETED, OrderStatus.CANCELLED):
            order.change_status(status)
            assert not order.holds_reservation
