"""Composition root: wires the three services together.

This is the only place in the codebase that knows about *all* layers.
State is in-memory, so each call to ``build_services`` starts a fresh
restaurant.
"""

from __future__ import annotations

from dataclasses import dataclass

from restaurant.domain.service.catalog_service import CatalogService
from restaurant.domain.service.invoice_service import InvoiceService
from restaurant.domain.service.order_service import OrderService
from restaurant.infrastructure.config import Settings, get_settings
from restaurant.infrastructure.seed import seed_demo_menu


@dataclass(frozen=True)
class Services:
    catalog: CatalogService
    orders: OrderService
    invoices: InvoiceService
    settings: Settings


def build_services(settings: Settings | None = None) -> Services:
    settings = settings or get_settings()

    catalog = CatalogService()
    if settings.seed_demo_menu:
        seed_demo_menu(catalog)

    orders = OrderService()
    invoices = InvoiceService(orders)
    return Services(catalog=catalog, orders=orders, invoices=invoices, settings=settings)
