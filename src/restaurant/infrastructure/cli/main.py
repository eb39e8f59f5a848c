import click

from restaurant.infrastructure.bootstrap import build_services
from restaurant.infrastructure.cli.product_commands import product_menu
from restaurant.infrastructure.cli.session import session
from restaurant.infrastructure.config import get_settings
from restaurant.infrastructure.logging import setup_logging


@click.group()
@click.option("--log-level", default=None, help="Override the configured log level.")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Restaurant: catalog, orders and invoices"""
    settings = get_settings()
    setup_logging(log_level or settings.log_level)
    ctx.obj = build_services(settings)


# Register subcommands
cli.add_command(product_menu)
cli.add_command(session)
