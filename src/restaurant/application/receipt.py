"""Printed receipt formatting.

Builds the human-readable invoice as a list of lines; the caller decides
where to print it.  Line items are listed from the order as it is now,
while the TOTAL line always shows the amount billed at issuance.
"""

from __future__ import annotations

from restaurant.application.dto import format_local
from restaurant.domain.model.invoice import Invoice

DEFAULT_WIDTH = 50


def render_invoice(invoice: Invoice, width: int = DEFAULT_WIDTH) -> list[str]:
    heavy = "=" * width
    light = "-" * width

    lines = [
        heavy,
        f"INVOICE #{invoice.number}".center(width).rstrip(),
        heavy,
        f"Customer: {invoice.customer_name}",
        f"Date: {format_local(invoice.issued_at)}",
        f"Order #: {invoice.order_id}",
        light,
    ]
    lines.extend(f"- {product}" for product in invoice.order.items)
    lines.extend([
        light,
        f"TOTAL: {invoice.total}",
        heavy,
    ])
    return lines
