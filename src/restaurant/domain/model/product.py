"""Product variants.

The catalog holds three kinds of products that share one pricing
interface: ``final_price``.  Each variant carries a class-level ``kind``
tag so callers can filter on the tag instead of on the Python type.

Products are created by the catalog service, which validates names and
prices; the constructors here trust their input.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import ClassVar

from restaurant.domain.model.value_objects import Money


class ProductKind(Enum):
    FOOD = "food"
    DRINK = "drink"
    COMBO = "combo"


# ---------------------------------------------------------------------------
# Constants for pricing rules
# ---------------------------------------------------------------------------
FOOD_COURSES = ("entrada", "principal", "postre")

DRINK_SURCHARGES: dict[str, Decimal] = {
    "pequeno": Decimal("1.0"),
    "mediano": Decimal("1.2"),
    "grande": Decimal("1.4"),
}


class Product(ABC):
    """Common shape of every catalog entry.

    Each variant declares its own dataclass fields: Food and Drink are
    frozen once created, while a Combo keeps growing through ``add_item``.
    """

    kind: ClassVar[ProductKind]

    name: str
    base_price: Money

    @property
    @abstractmethod
    def final_price(self) -> Money:
        """Price charged when the product is ordered."""

    @property
    @abstractmethod
    def detail(self) -> str:
        """Short variant-specific label shown between brackets."""

    def _suffix(self) -> str:
        return ""

    def __str__(self) -> str:
        return f"{self.name} [{self.detail}] - {self.final_price}{self._suffix()}"


@dataclass(frozen=True)
class Food(Product):
    kind: ClassVar[ProductKind] = ProductKind.FOOD

    name: str
    base_price: Money
    course: str
    vegetarian: bool = False

    @property
    def final_price(self) -> Money:
        return self.base_price

    @property
    def detail(self) -> str:
        return self.course

    def _suffix(self) -> str:
        return " (vegetarian)" if self.vegetarian else ""


@dataclass(frozen=True)
class Drink(Product):
    """A drink priced by size.

    Medium adds 20% and large adds 40% to the base price.  Sizes are
    matched case-insensitively; anything unrecognized is charged as small.
    """

    kind: ClassVar[ProductKind] = ProductKind.DRINK

    name: str
    base_price: Money
    size: str
    has_alcohol: bool = False

    @property
    def surcharge(self) -> Decimal:
        return DRINK_SURCHARGES.get(self.size.strip().lower(), Decimal("1.0"))

    @property
    def final_price(self) -> Money:
        return self.base_price * self.surcharge

    @property
    def detail(self) -> str:
        return self.size

    def _suffix(self) -> str:
        return " (alcoholic)" if self.has_alcohol else " (non-alcoholic)"


@dataclass
class Combo(Product):
    """A bundle of products sold at a percentage discount.

    The base price is unused; the price is derived from the current
    contents every time it is read, so items added after creation
    are reflected immediately.  Items are shared by reference.
    """

    kind: ClassVar[ProductKind] = ProductKind.COMBO

    name: str
    discount_percent: Decimal = Decimal("0")
    base_price: Money = field(default=Money(Decimal("0.00")), init=False)
    _items: list[Product] = field(default_factory=list, init=False, repr=False)

    def add_item(self, product: Product | None) -> None:
        if product is not None:
            self._items.append(product)

    @property
    def items(self) -> list[Product]:
        return list(self._items)

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for item in self._items:
            result = result + item.final_price
        return result

    @property
    def final_price(self) -> Money:
        factor = Decimal("1") - self.discount_percent / Decimal("100")
        return self.subtotal * factor

    @property
    def detail(self) -> str:
        return f"Combo - {self.discount_percent:.0f}% off"
