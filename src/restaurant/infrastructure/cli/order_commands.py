"""CLI commands for orders."""

from __future__ import annotations

import click

from restaurant.application.dto import OrderDTO
from restaurant.domain.exceptions import DomainException
from restaurant.domain.model.order import OrderStatus
from restaurant.infrastructure.bootstrap import Services

STATUS_CHOICE = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status}, origin={dto.origin})")
    if dto.customer_name:
        click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()

    click.echo(f"  {'Product':<22} {'Detail':<20} {'Price':>10}")
    click.echo(f"  {'-'*54}")
    for item in dto.items:
        click.echo(f"  {item.name:<22} {item.detail:<20} {item.price:>10}")
    click.echo(f"  {'-'*54}")
    click.echo(f"  {'Order Total':<27} {dto.total:>27}")


def _display_orders(orders: list[OrderDTO]) -> None:
    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Status':<10} {'Customer':<20} {'Items':>5} {'Total':>10}")
    click.echo("-" * 55)
    for o in orders:
        click.echo(
            f"{o.id:<6} {o.status:<10} {o.customer_name or '-':<20} {len(o.items):>5} {o.total:>10}"
        )


@click.command("new")
@click.option("--customer", default=None, help="Customer name (self-service order).")
@click.pass_obj
def order_new(services: Services, customer: str | None) -> None:
    """Open a new pending order."""
    order = services.orders.create_order(customer)
    click.echo(f"Order #{order.id} created  (origin={order.origin.value})")


@click.command("add")
@click.argument("order_id", type=int)
@click.argument("product_name")
@click.pass_obj
def order_add(services: Services, order_id: int, product_name: str) -> None:
    """Add a catalog product to an order."""
    product = services.catalog.find_by_name(product_name)
    if product is None:
        raise click.ClickException(f"Product not found: '{product_name}'")

    if not services.orders.add_product_to_order(order_id, product):
        raise click.ClickException(f"Order #{order_id} not found")

    click.echo(
        f"Added {product.name} to order #{order_id} "
        f"(total {services.orders.total_for(order_id)})"
    )


@click.command("show")
@click.argument("order_id", type=int)
@click.pass_obj
def order_show(services: Services, order_id: int) -> None:
    """Show details of an order."""
    order = services.orders.find_by_id(order_id)
    if order is None:
        raise click.ClickException(f"Order #{order_id} not found")

    _display_order(OrderDTO.from_order(order))


@click.command("orders")
@click.option(
    "--status", type=click.Choice(["pending", "completed", "all"], case_sensitive=False),
    default="all", show_default=True, help="Filter by status.",
)
@click.pass_obj
def order_list(services: Services, status: str) -> None:
    """List orders."""
    if status == "pending":
        orders = services.orders.list_pending()
    elif status == "completed":
        orders = services.orders.list_completed()
    else:
        orders = services.orders.list_all()
    _display_orders([OrderDTO.from_order(o) for o in orders])


@click.command("status")
@click.argument("order_id", type=int)
@click.argument("status", type=STATUS_CHOICE)
@click.pass_obj
def order_status(services: Services, order_id: int, status: str) -> None:
    """Set an order's status."""
    try:
        found = services.orders.set_status(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not found:
        raise click.ClickException(f"Order #{order_id} not found")
    click.echo(f"Order #{order_id} is now {status.lower()}.")
