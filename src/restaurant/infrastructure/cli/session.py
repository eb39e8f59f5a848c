"""Interactive session over one set of in-memory services.

Nothing is persisted, so building orders and issuing invoices only makes
sense inside a single process.  Each input line is split shell-style and
dispatched to the ``session_commands`` group; errors are printed and the
session carries on.
"""

from __future__ import annotations

import shlex

import click

from restaurant.infrastructure.bootstrap import Services
from restaurant.infrastructure.cli.invoice_commands import (
    invoice_issue,
    invoice_list,
    invoice_receipt,
    invoice_report,
)
from restaurant.infrastructure.cli.order_commands import (
    order_add,
    order_list,
    order_new,
    order_show,
    order_status,
)
from restaurant.infrastructure.cli.product_commands import (
    product_add_combo,
    product_add_drink,
    product_add_food,
    product_menu,
)

EXIT_WORDS = {"quit", "exit"}


@click.group()
def session_commands() -> None:
    """Commands available inside a session ('quit' to leave)."""


# Register subcommands
session_commands.add_command(product_menu)
session_commands.add_command(product_add_food)
session_commands.add_command(product_add_drink)
session_commands.add_command(product_add_combo)
session_commands.add_command(order_new)
session_commands.add_command(order_add)
session_commands.add_command(order_show)
session_commands.add_command(order_list)
session_commands.add_command(order_status)
session_commands.add_command(invoice_issue)
session_commands.add_command(invoice_receipt)
session_commands.add_command(invoice_list)
session_commands.add_command(invoice_report)


def run_line(services: Services, line: str) -> None:
    """Execute one session line; usage and domain errors are echoed."""
    try:
        args = shlex.split(line)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        return
    if not args:
        return
    if args[0] == "help":
        args = ["--help"]

    try:
        session_commands.main(args, prog_name="", standalone_mode=False, obj=services)
    except click.ClickException as exc:
        exc.show()


@click.command("session")
@click.pass_obj
def session(services: Services) -> None:
    """Start an interactive restaurant session."""
    click.echo("Restaurant session started. Type 'help' for commands, 'quit' to leave.")
    while True:
        try:
            line = click.prompt(
                "restaurant", default="", show_default=False, prompt_suffix="> "
            )
        except click.Abort:
            click.echo()
            break
        if line.strip().lower() in EXIT_WORDS:
            break
        run_line(services, line)
    click.echo("Bye.")
