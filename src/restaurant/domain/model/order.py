"""Order aggregate.

An Order is a mutable cart of catalog products.  It does not copy the
products it holds: the same product object may sit in several orders,
and the total is always computed from the items' current prices.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from restaurant.domain.exceptions import ValidationError
from restaurant.domain.model.product import Product
from restaurant.domain.model.value_objects import Money


class OrderStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @staticmethod
    def parse(value: OrderStatus | str) -> OrderStatus:
        if isinstance(value, OrderStatus):
            return value
        try:
            return OrderStatus(str(value).strip().lower())
        except ValueError as exc:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(
                f"Unknown order status '{value}' (expected one of: {allowed})"
            ) from exc


class OrderOrigin(Enum):
    STAFF = "staff"
    CUSTOMER = "customer"


@dataclass
class Order:
    """Aggregate root for restaurant orders.

    Orders are created by the order service, which assigns the id.
    Status transitions are not validated: any status can be set at
    any time.
    """

    id: int
    status: OrderStatus = OrderStatus.PENDING
    customer_name: str = ""
    origin: OrderOrigin = OrderOrigin.STAFF
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    _items: list[Product] = field(default_factory=list, init=False, repr=False)

    def add_item(self, product: Product | None) -> None:
        """Append a product; ``None`` is ignored."""
        if product is not None:
            self._items.append(product)

    def set_status(self, status: OrderStatus | str) -> None:
        self.status = OrderStatus.parse(status)

    # --- Computed properties --------------------------------------------------

    @property
    def items(self) -> list[Product]:
        return list(self._items)

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self._items:
            result = result + item.final_price
        return result

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def item_count(self) -> int:
        return len(self._items)

    @property
    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING
