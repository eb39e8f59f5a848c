"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry already-formatted data from the domain to the CLI so the
presentation code never reaches into domain objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from restaurant.domain.model.invoice import Invoice
from restaurant.domain.model.order import Order
from restaurant.domain.model.product import Product

TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M"


def format_local(moment: datetime) -> str:
    """Render an aware timestamp on the local wall clock."""
    return moment.astimezone().strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog row."""

    name: str
    kind: str
    detail: str
    price: str  # formatted, e.g. "$2.80"
    description: str

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            name=product.name,
            kind=product.kind.value,
            detail=product.detail,
            price=str(product.final_price),
            description=str(product),
        )


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_name: str
    origin: str
    status: str
    items: list[ProductDTO]
    total: str
    created_at: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            customer_name=order.customer_name,
            origin=order.origin.value,
            status=order.status.value,
            items=[ProductDTO.from_product(p) for p in order.items],
            total=str(order.total),
            created_at=format_local(order.created_at),
        )


@dataclass(frozen=True)
class InvoiceDTO:
    """Output: an invoice row."""

    number: int
    order_id: int
    customer_name: str
    total: str
    issued_at: str

    @staticmethod
    def from_invoice(invoice: Invoice) -> InvoiceDTO:
        return InvoiceDTO(
            number=invoice.number,
            order_id=invoice.order_id,
            customer_name=invoice.customer_name,
            total=str(invoice.total),
            issued_at=format_local(invoice.issued_at),
        )
