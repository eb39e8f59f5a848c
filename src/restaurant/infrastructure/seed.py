"""Demonstration menu loaded at startup.

A fixed fixture, not business logic: four foods, three drinks and one
family combo built from products that are not listed on their own.
"""

from __future__ import annotations

from restaurant.domain.model.product import Drink, Food
from restaurant.domain.model.value_objects import Money
from restaurant.domain.service.catalog_service import CatalogService

DEMO_FOODS = [
    ("Classic Burger", "12.99", "principal", False),
    ("Caesar Salad", "8.50", "entrada", True),
    ("Margherita Pizza", "15.99", "principal", True),
    ("Tiramisu", "6.99", "postre", True),
]

DEMO_DRINKS = [
    ("Cola", "2.50", "mediano", False),
    ("Craft Beer", "5.99", "grande", True),
    ("Mineral Water", "1.50", "pequeno", False),
]


def seed_demo_menu(catalog: CatalogService) -> None:
    for name, price, course, vegetarian in DEMO_FOODS:
        catalog.add_food(name, price, course, vegetarian)
    for name, price, size, has_alcohol in DEMO_DRINKS:
        catalog.add_drink(name, price, size, has_alcohol)

    catalog.add_combo(
        "Family Combo",
        15,
        items=[
            Food("Family Pizza", Money.of("25.99"), "principal", vegetarian=True),
            Drink("Soda Pitcher", Money.of("3.50"), "grande"),
            Food("Ice Cream", Money.of("4.99"), "postre", vegetarian=True),
        ],
    )
