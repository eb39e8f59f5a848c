"""Invoice: an immutable billing record for one order.

The total is captured when the invoice is issued.  Adding items to the
order afterwards (nothing prevents it) does not change what was billed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from restaurant.domain.exceptions import ValidationError
from restaurant.domain.model.order import Order, OrderStatus
from restaurant.domain.model.value_objects import Money


@dataclass(frozen=True)
class Invoice:
    """Billing snapshot.

    Use ``Invoice.issue()`` to create invoices; it enforces the
    construction rules and completes the order.
    """

    number: int
    order: Order
    customer_name: str
    total: Money
    issued_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def issue(number: int, order: Order | None, customer_name: str | None) -> Invoice:
        """Bill *order* for *customer_name* and mark the order completed."""
        if order is None:
            raise ValidationError("Order is required to issue an invoice")
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")

        invoice = Invoice(
            number=number,
            order=order,
            customer_name=customer_name.strip(),
            total=order.total,  # <-- snapshot
        )
        order.set_status(OrderStatus.COMPLETED)
        return invoice

    # --- Display --------------------------------------------------------------

    @property
    def order_id(self) -> int:
        return self.order.id

    def summary(self) -> str:
        return (
            f"Invoice #{self.number} | Customer: {self.customer_name} | "
            f"Order: #{self.order_id} | Total: {self.total}"
        )

    def __str__(self) -> str:
        return f"Invoice #{self.number} - Customer: {self.customer_name} - Total: {self.total}"
