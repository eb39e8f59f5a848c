"""Unit tests for the Invoice snapshot."""

import pytest

from restaurant.domain.exceptions import ValidationError
from restaurant.domain.model.invoice import Invoice
from restaurant.domain.model.order import Order, OrderStatus
from restaurant.domain.model.value_objects import Money
from tests.factories import make_drink, make_food


def _order_with_items() -> Order:
    order = Order(id=7)
    order.add_item(make_food("Soup", "5.00"))
    order.add_item(make_drink("Cola", "2.00", "grande"))
    return order


class TestInvoiceIssue:

    def test_snapshots_total_and_completes_order(self):
        order = _order_with_items()
        invoice = Invoice.issue(1, order, "Ana")
        assert invoice.total == Money.of("7.80")
        assert invoice.order is order
        assert order.status == OrderStatus.COMPLETED

    def test_customer_name_is_trimmed(self):
        invoice = Invoice.issue(1, _order_with_items(), "  Ana  ")
        assert invoice.customer_name == "Ana"

    def test_blank_customer_rejected(self):
        order = _order_with_items()
        with pytest.raises(ValidationError, match="Customer name"):
            Invoice.issue(1, order, "   ")
        assert order.status == OrderStatus.PENDING

    def test_missing_order_rejected(self):
        with pytest.raises(ValidationError, match="Order is required"):
            Invoice.issue(1, None, "Ana")

    def test_total_unaffected_by_later_order_changes(self):
        order = _order_with_items()
        invoice = Invoice.issue(1, order, "Ana")
        order.add_item(make_food("Cake", "9.00"))
        assert invoice.total == Money.of("7.80")
        assert order.total == Money.of("16.80")

    def test_invoice_is_immutable(self):
        invoice = Invoice.issue(1, _order_with_items(), "Ana")
        with pytest.raises(AttributeError):
            invoice.total = Money.of("1.00")


class TestInvoiceDisplay:

    def test_summary(self):
        invoice = Invoice.issue(3, _order_with_items(), "Ana")
        assert invoice.summary() == "Invoice #3 | Customer: Ana | Order: #7 | Total: $7.80"

    def test_str(self):
        invoice = Invoice.issue(3, _order_with_items(), "Ana")
        assert str(invoice) == "Invoice #3 - Customer: Ana - Total: $7.80"
