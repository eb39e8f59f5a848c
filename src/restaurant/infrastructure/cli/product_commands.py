"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from restaurant.application.dto import ProductDTO
from restaurant.domain.exceptions import DomainException
from restaurant.domain.model.product import FOOD_COURSES, DRINK_SURCHARGES, ProductKind
from restaurant.infrastructure.bootstrap import Services

KIND_CHOICE = click.Choice([k.value for k in ProductKind], case_sensitive=False)


def display_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'Name':<22} {'Type':<6} {'Detail':<20} {'Price':>10}")
    click.echo("-" * 61)
    for p in products:
        click.echo(f"{p.name:<22} {p.kind:<6} {p.detail:<20} {p.price:>10}")


@click.command("menu")
@click.option("--kind", type=KIND_CHOICE, default=None, help="Only list one product type.")
@click.pass_obj
def product_menu(services: Services, kind: str | None) -> None:
    """List the products in the catalog."""
    if kind is None:
        products = services.catalog.list_all()
    else:
        products = services.catalog.list_by_kind(kind)
    display_products([ProductDTO.from_product(p) for p in products])


@click.command("food")
@click.argument("name")
@click.argument("price")
@click.argument("course", type=click.Choice(FOOD_COURSES, case_sensitive=False))
@click.option("--vegetarian", is_flag=True, default=False, help="Mark as vegetarian.")
@click.pass_obj
def product_add_food(
    services: Services, name: str, price: str, course: str, vegetarian: bool
) -> None:
    """Add a food item to the catalog."""
    try:
        food = services.catalog.add_food(name, price, course.lower(), vegetarian)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added {food}")


@click.command("drink")
@click.argument("name")
@click.argument("price")
@click.argument("size", type=click.Choice(list(DRINK_SURCHARGES), case_sensitive=False))
@click.option("--alcohol", is_flag=True, default=False, help="Drink contains alcohol.")
@click.pass_obj
def product_add_drink(
    services: Services, name: str, price: str, size: str, alcohol: bool
) -> None:
    """Add a drink to the catalog (price is for the small size)."""
    try:
        drink = services.catalog.add_drink(name, price, size.lower(), alcohol)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added {drink}")


@click.command("combo")
@click.argument("name")
@click.argument("discount")
@click.argument("items", nargs=-1)
@click.pass_obj
def product_add_combo(
    services: Services, name: str, discount: str, items: tuple[str, ...]
) -> None:
    """Add a combo built from existing catalog products.

    ITEMS are product names; quote names that contain spaces.
    """
    products = []
    for item_name in items:
        product = services.catalog.find_by_name(item_name)
        if product is None:
            raise click.ClickException(f"Product not found: '{item_name}'")
        products.append(product)

    try:
        combo = services.catalog.add_combo(name, discount, items=products)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added {combo}")
