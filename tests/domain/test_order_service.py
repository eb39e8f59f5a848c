"""Tests for the order service."""

import pytest

from restaurant.domain.exceptions import ValidationError
from restaurant.domain.model.order import OrderOrigin, OrderStatus
from restaurant.domain.model.value_objects import Money
from restaurant.domain.service.order_service import OrderService
from tests.factories import make_drink, make_food


class TestCreateOrder:

    def test_sequential_ids_start_at_one(self):
        service = OrderService()
        assert service.create_order().id == 1
        assert service.create_order("Ana").id == 2
        assert service.create_order().id == 3

    def test_staff_order(self):
        order = OrderService().create_order()
        assert order.origin == OrderOrigin.STAFF
        assert order.customer_name == ""
        assert order.status == OrderStatus.PENDING
        assert order.is_empty

    def test_customer_order(self):
        order = OrderService().create_order("Ana")
        assert order.origin == OrderOrigin.CUSTOMER
        assert order.customer_name == "Ana"

    def test_counters_are_per_instance(self):
        OrderService().create_order()
        assert OrderService().create_order().id == 1


class TestAddProductToOrder:

    def test_appends_and_returns_true(self):
        service = OrderService()
        order = service.create_order()
        soup = make_food()
        assert service.add_product_to_order(order.id, soup) is True
        assert order.items == [soup]

    def test_missing_order_returns_false(self):
        service = OrderService()
        assert service.add_product_to_order(42, make_food()) is False

    def test_missing_product_returns_false(self):
        service = OrderService()
        order = service.create_order()
        assert service.add_product_to_order(order.id, None) is False
        assert order.is_empty

    def test_completed_order_still_accepts_products(self):
        service = OrderService()
        order = service.create_order()
        service.set_status(order.id, OrderStatus.COMPLETED)
        assert service.add_product_to_order(order.id, make_food()) is True
        assert order.item_count == 1


class TestOrderQueries:

    def test_find_by_id(self):
        service = OrderService()
        order = service.create_order()
        assert service.find_by_id(order.id) is order
        assert service.find_by_id(99) is None

    def test_list_by_status_preserves_order(self):
        service = OrderService()
        a, b, c = service.create_order(), service.create_order(), service.create_order()
        service.set_status(b.id, OrderStatus.COMPLETED)
        service.set_status(c.id, "cancelled")
        assert service.list_pending() == [a]
        assert service.list_completed() == [b]
        assert service.list_all() == [a, b, c]
        assert service.pending_count == 1
        assert service.count == 3

    def test_lists_are_copies(self):
        service = OrderService()
        service.create_order()
        service.list_all().clear()
        service.list_pending().clear()
        assert service.count == 1

    def test_order_items_are_a_copy(self):
        service = OrderService()
        order = service.create_order()
        service.add_product_to_order(order.id, make_food())

        service.find_by_id(order.id).items.clear()
        service.list_pending()[0].items.append(make_drink())

        assert service.find_by_id(order.id).item_count == 1
        assert service.total_for(order.id) == Money.of("5.00")

    def test_total_for(self):
        service = OrderService()
        order = service.create_order()
        service.add_product_to_order(order.id, make_food(price="5.00"))
        service.add_product_to_order(order.id, make_drink(price="2.00", size="grande"))
        assert service.total_for(order.id) == Money.of("7.80")
        assert service.total_for(99) == Money.zero()


class TestCanBeInvoiced:

    def test_pending_with_items(self):
        service = OrderService()
        order = service.create_order()
        service.add_product_to_order(order.id, make_food())
        assert service.can_be_invoiced(order.id)

    def test_empty_order(self):
        service = OrderService()
        assert not service.can_be_invoiced(service.create_order().id)

    def test_not_pending(self):
        service = OrderService()
        order = service.create_order()
        service.add_product_to_order(order.id, make_food())
        service.set_status(order.id, OrderStatus.CANCELLED)
        assert not service.can_be_invoiced(order.id)

    def test_missing_order(self):
        assert not OrderService().can_be_invoiced(1)


class TestSetStatus:

    def test_missing_order_returns_false(self):
        assert OrderService().set_status(5, OrderStatus.COMPLETED) is False

    def test_unknown_status_rejected(self):
        service = OrderService()
        order = service.create_order()
        with pytest.raises(ValidationError):
            service.set_status(order.id, "lost")
