"""Invoice service: issues invoices and answers billing queries.

Issuing follows a validate-then-mutate approach: every check runs before
the invoice is built, so a rejected request leaves both the order and the
invoice list untouched.

The service reads orders through the order service but never writes to
its list; the only order mutation (status -> completed) is done by
``Invoice.issue`` on the order object itself.
"""

from __future__ import annotations

from loguru import logger

from restaurant.domain.exceptions import (
    EntityNotFoundError,
    InvalidStateError,
    ValidationError,
)
from restaurant.domain.model.invoice import Invoice
from restaurant.domain.model.value_objects import Money
from restaurant.domain.service.order_service import OrderService


class InvoiceService:

    def __init__(self, order_service: OrderService) -> None:
        self._order_service = order_service
        self._invoices: list[Invoice] = []
        self._next_number = 1

    def issue_invoice(self, order_id: int, customer_name: str) -> Invoice:
        """Bill a pending, non-empty order.

        Raises:
            ValidationError: the customer name is blank.
            EntityNotFoundError: no order has *order_id*.
            InvalidStateError: the order is not pending or has no items.
        """
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")

        order = self._order_service.find_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        if not self._order_service.can_be_invoiced(order_id):
            raise InvalidStateError(
                f"Order #{order_id} cannot be invoiced: it must be pending "
                f"and contain at least one product (status={order.status.value}, "
                f"items={order.item_count})"
            )

        invoice = Invoice.issue(self._next_number, order, customer_name)
        self._next_number += 1
        self._invoices.append(invoice)
        logger.info(
            "Issued invoice #{} for order #{} to {} ({})",
            invoice.number, order_id, invoice.customer_name, invoice.total,
        )
        return invoice

    # --- Queries --------------------------------------------------------------

    def find_by_number(self, number: int) -> Invoice | None:
        for invoice in self._invoices:
            if invoice.number == number:
                return invoice
        return None

    def list_all(self) -> list[Invoice]:
        return list(self._invoices)

    def list_by_customer(self, customer_name: str) -> list[Invoice]:
        wanted = (customer_name or "").lower()
        return [i for i in self._invoices if i.customer_name.lower() == wanted]

    def total_billed(self) -> Money:
        return self._sum(self._invoices)

    def total_billed_for(self, customer_name: str) -> Money:
        return self._sum(self.list_by_customer(customer_name))

    def highest_invoice(self) -> Invoice | None:
        """Invoice with the largest total; the earliest wins a tie."""
        highest: Invoice | None = None
        for invoice in self._invoices:
            if highest is None or invoice.total > highest.total:
                highest = invoice
        return highest

    def lowest_invoice(self) -> Invoice | None:
        """Invoice with the smallest total; the earliest wins a tie."""
        lowest: Invoice | None = None
        for invoice in self._invoices:
            if lowest is None or invoice.total < lowest.total:
                lowest = invoice
        return lowest

    def exists_invoice_for_order(self, order_id: int) -> bool:
        return any(invoice.order_id == order_id for invoice in self._invoices)

    @property
    def count(self) -> int:
        return len(self._invoices)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _sum(invoices: list[Invoice]) -> Money:
        result = Money.zero()
        for invoice in invoices:
            result = result + invoice.total
        return result
