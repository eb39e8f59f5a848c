"""CLI commands for invoices and billing reports."""

from __future__ import annotations

import click

from restaurant.application.dto import InvoiceDTO
from restaurant.application.receipt import render_invoice
from restaurant.domain.exceptions import DomainException
from restaurant.domain.model.invoice import Invoice
from restaurant.infrastructure.bootstrap import Services


def _print_receipt(services: Services, invoice: Invoice) -> None:
    for line in render_invoice(invoice, width=services.settings.receipt_width):
        click.echo(line)


@click.command("invoice")
@click.argument("order_id", type=int)
@click.argument("customer")
@click.pass_obj
def invoice_issue(services: Services, order_id: int, customer: str) -> None:
    """Issue an invoice for a pending order and print it."""
    try:
        invoice = services.invoices.issue_invoice(order_id, customer)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _print_receipt(services, invoice)


@click.command("receipt")
@click.argument("number", type=int)
@click.pass_obj
def invoice_receipt(services: Services, number: int) -> None:
    """Reprint an issued invoice."""
    invoice = services.invoices.find_by_number(number)
    if invoice is None:
        raise click.ClickException(f"Invoice #{number} not found")

    _print_receipt(services, invoice)


@click.command("invoices")
@click.option("--customer", default=None, help="Only invoices billed to this customer.")
@click.pass_obj
def invoice_list(services: Services, customer: str | None) -> None:
    """List issued invoices."""
    if customer is None:
        invoices = services.invoices.list_all()
    else:
        invoices = services.invoices.list_by_customer(customer)

    if not invoices:
        click.echo("No invoices found.")
        return

    click.echo(f"{'No.':<6} {'Order':<6} {'Customer':<20} {'Issued':<17} {'Total':>10}")
    click.echo("-" * 63)
    for dto in (InvoiceDTO.from_invoice(i) for i in invoices):
        click.echo(
            f"{dto.number:<6} {dto.order_id:<6} {dto.customer_name:<20} "
            f"{dto.issued_at:<17} {dto.total:>10}"
        )


@click.command("report")
@click.option("--customer", default=None, help="Restrict the billed total to one customer.")
@click.pass_obj
def invoice_report(services: Services, customer: str | None) -> None:
    """Show billing totals and the highest / lowest invoice."""
    invoices = services.invoices

    click.echo(f"Invoices issued: {invoices.count}")
    click.echo(f"Pending orders:  {services.orders.pending_count}")
    click.echo(f"Total billed:    {invoices.total_billed()}")
    if customer is not None:
        click.echo(f"Billed to {customer}: {invoices.total_billed_for(customer)}")

    highest = invoices.highest_invoice()
    lowest = invoices.lowest_invoice()
    click.echo(f"Highest: {highest.summary() if highest else 'none'}")
    click.echo(f"Lowest:  {lowest.summary() if lowest else 'none'}")
