"""Unit tests for the product variants and their pricing rules."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from restaurant.domain.model.product import Combo, ProductKind
from restaurant.domain.model.value_objects import Money
from tests.factories import make_combo, make_drink, make_food


class TestFood:

    def test_final_price_is_base_price(self):
        food = make_food(price="12.99")
        assert food.final_price == Money.of("12.99")

    def test_kind_tag(self):
        assert make_food().kind is ProductKind.FOOD

    def test_str_shows_course_and_vegetarian(self):
        food = make_food("Caesar Salad", "8.50", "entrada", vegetarian=True)
        assert str(food) == "Caesar Salad [entrada] - $8.50 (vegetarian)"

    def test_fields_cannot_change(self):
        food = make_food(price="5.00")
        with pytest.raises(FrozenInstanceError):
            food.base_price = Money.of("1.00")
        assert food.final_price == Money.of("5.00")

    def test_str_without_vegetarian_suffix(self):
        food = make_food("Burger", "12.99", "principal", vegetarian=False)
        assert str(food) == "Burger [principal] - $12.99"


class TestDrinkSurcharge:

    @pytest.mark.parametrize(
        "size, expected",
        [
            ("pequeno", "2.00"),
            ("mediano", "2.40"),
            ("grande", "2.80"),
            ("GRANDE", "2.80"),
            ("Mediano", "2.40"),
            ("extra", "2.00"),
            ("pequeño", "2.00"),
        ],
    )
    def test_price_by_size(self, size, expected):
        drink = make_drink(price="2.00", size=size)
        assert drink.final_price == Money.of(expected)

    def test_kind_tag(self):
        assert make_drink().kind is ProductKind.DRINK

    def test_size_cannot_change(self):
        drink = make_drink(size="pequeno")
        with pytest.raises(FrozenInstanceError):
            drink.size = "grande"

    def test_str_shows_size_and_alcohol(self):
        beer = make_drink("Craft Beer", "5.00", "grande", has_alcohol=True)
        assert str(beer) == "Craft Beer [grande] - $7.00 (alcoholic)"


class TestCombo:

    def test_discount_applied_to_sum(self):
        combo = make_combo(discount="15", items=[
            make_food(price="25.99", course="principal"),
            make_drink(price="3.50", size="grande"),
            make_food(price="4.99", course="postre"),
        ])
        # (25.99 + 4.90 + 4.99) * 0.85
        assert combo.final_price == Money.of("30.498")

    def test_empty_combo_costs_nothing(self):
        assert make_combo(discount="20").final_price == Money.zero()

    def test_zero_discount(self):
        combo = make_combo(discount="0", items=[make_food(price="5.00")])
        assert combo.final_price == Money.of("5.00")

    def test_full_discount(self):
        combo = make_combo(discount="100", items=[make_food(price="5.00")])
        assert combo.final_price == Money.zero()

    def test_base_price_is_unused(self):
        combo = Combo(name="Empty", discount_percent=Decimal("10"))
        assert combo.base_price == Money.zero()

    def test_combo_stays_mutable(self):
        combo = make_combo(discount="10")
        combo.discount_percent = Decimal("20")
        combo.add_item(make_food(price="10.00"))
        assert combo.final_price == Money.of("8.00")

    def test_add_none_is_ignored(self):
        combo = make_combo()
        combo.add_item(None)
        assert combo.items == []

    def test_nested_combo(self):
        inner = make_combo(discount="50", items=[make_food(price="10.00")])
        outer = make_combo(discount="10", items=[inner, make_food(price="5.00")])
        assert outer.final_price == Money.of("9.00")

    def test_items_returns_copy(self):
        combo = make_combo(items=[make_food()])
        combo.items.append(make_drink())
        assert len(combo.items) == 1

    def test_price_follows_later_additions(self):
        combo = make_combo(discount="10", items=[make_food(price="10.00")])
        assert combo.final_price == Money.of("9.00")
        combo.add_item(make_food(price="10.00"))
        assert combo.final_price == Money.of("18.00")

    def test_str(self):
        combo = make_combo("Family Combo", "15", items=[make_food(price="10.00")])
        assert str(combo) == "Family Combo [Combo - 15% off] - $8.50"

    def test_kind_tag(self):
        assert make_combo().kind is ProductKind.COMBO
