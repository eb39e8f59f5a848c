"""Catalog service: owns the list of products available for ordering.

Validation happens here, before a product is built and inserted, so the
product classes themselves never see a blank name or a non-positive price.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from loguru import logger

from restaurant.domain.exceptions import ValidationError
from restaurant.domain.model.product import Combo, Drink, Food, Product, ProductKind
from restaurant.domain.model.value_objects import Money, to_decimal

Number = str | float | int | Decimal


class CatalogService:

    def __init__(self, products: Iterable[Product] | None = None) -> None:
        self._products: list[Product] = list(products or [])

    # --- Commands -------------------------------------------------------------

    def add_food(
        self,
        name: str,
        price: Number,
        course: str,
        vegetarian: bool = False,
    ) -> Food:
        clean_name, amount = self._validate_product(name, price)
        food = Food(name=clean_name, base_price=amount, course=course, vegetarian=vegetarian)
        self._insert(food)
        return food

    def add_drink(
        self,
        name: str,
        price: Number,
        size: str,
        has_alcohol: bool = False,
    ) -> Drink:
        clean_name, amount = self._validate_product(name, price)
        drink = Drink(name=clean_name, base_price=amount, size=size, has_alcohol=has_alcohol)
        self._insert(drink)
        return drink

    def add_combo(
        self,
        name: str,
        discount_percent: Number,
        items: Iterable[Product] = (),
    ) -> Combo:
        """Add an empty (or pre-filled) combo.

        The combo is returned so the caller can keep adding items with
        ``Combo.add_item``; those additions show up in the catalog too
        because the catalog holds the same object.
        """
        clean_name = self._validate_name(name)
        discount = to_decimal(discount_percent, "discount")
        if discount < 0 or discount > 100:
            raise ValidationError("Discount must be between 0 and 100%")

        combo = Combo(name=clean_name, discount_percent=discount)
        for item in items:
            combo.add_item(item)
        self._insert(combo)
        return combo

    # --- Queries --------------------------------------------------------------

    def find_by_name(self, name: str) -> Product | None:
        """Case-insensitive exact match; first hit wins."""
        wanted = (name or "").strip().lower()
        for product in self._products:
            if product.name.lower() == wanted:
                return product
        return None

    def list_by_kind(self, kind: ProductKind | str) -> list[Product]:
        """Return every product tagged *kind*, in catalog order.

        An unknown tag is not an error; it simply matches nothing.
        """
        tag = kind.value if isinstance(kind, ProductKind) else str(kind).strip().lower()
        return [p for p in self._products if p.kind.value == tag]

    def list_all(self) -> list[Product]:
        return list(self._products)

    @property
    def count(self) -> int:
        return len(self._products)

    # --- Internal helpers -----------------------------------------------------

    def _insert(self, product: Product) -> None:
        self._products.append(product)
        logger.info(
            "Added {} '{}' to catalog at {}",
            product.kind.value, product.name, product.final_price,
        )

    @staticmethod
    def _validate_name(name: str) -> str:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        return name.strip()

    @classmethod
    def _validate_product(cls, name: str, price: Number) -> tuple[str, Money]:
        clean_name = cls._validate_name(name)
        amount = to_decimal(price, "price")
        if amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        return clean_name, Money(amount)
