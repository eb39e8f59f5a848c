"""Order service: owns the list of orders and their id counter.

Orders are never removed; they are only marked completed or cancelled.
Lookups that miss return ``None`` or ``False`` instead of raising, so
callers must check the result.
"""

from __future__ import annotations

from loguru import logger

from restaurant.domain.model.order import Order, OrderOrigin, OrderStatus
from restaurant.domain.model.product import Product
from restaurant.domain.model.value_objects import Money


class OrderService:

    def __init__(self) -> None:
        self._orders: list[Order] = []
        self._next_id = 1

    # --- Commands -------------------------------------------------------------

    def create_order(self, customer_name: str | None = None) -> Order:
        """Open a new pending order.

        Without a customer name the order is taken by staff; with one it
        is a customer self-service order.
        """
        if customer_name is None:
            order = Order(id=self._next_id)
        else:
            order = Order(
                id=self._next_id,
                customer_name=customer_name,
                origin=OrderOrigin.CUSTOMER,
            )
        self._next_id += 1
        self._orders.append(order)
        logger.info("Created order #{} (origin={})", order.id, order.origin.value)
        return order

    def add_product_to_order(self, order_id: int, product: Product | None) -> bool:
        # No status check: products can still be added to completed orders.
        order = self.find_by_id(order_id)
        if order is None or product is None:
            logger.warning(
                "Cannot add product to order #{}: {}",
                order_id,
                "order not found" if order is None else "no product given",
            )
            return False
        order.add_item(product)
        logger.debug("Added '{}' to order #{}", product.name, order_id)
        return True

    def set_status(self, order_id: int, status: OrderStatus | str) -> bool:
        order = self.find_by_id(order_id)
        if order is None:
            return False
        order.set_status(status)
        logger.info("Order #{} is now {}", order_id, order.status.value)
        return True

    # --- Queries --------------------------------------------------------------

    def find_by_id(self, order_id: int) -> Order | None:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    def list_all(self) -> list[Order]:
        return list(self._orders)

    def list_pending(self) -> list[Order]:
        return self._list_by_status(OrderStatus.PENDING)

    def list_completed(self) -> list[Order]:
        return self._list_by_status(OrderStatus.COMPLETED)

    def can_be_invoiced(self, order_id: int) -> bool:
        order = self.find_by_id(order_id)
        return order is not None and order.is_pending and not order.is_empty

    def total_for(self, order_id: int) -> Money:
        """Current total of an order, or zero when it does not exist."""
        order = self.find_by_id(order_id)
        return order.total if order is not None else Money.zero()

    @property
    def count(self) -> int:
        return len(self._orders)

    @property
    def pending_count(self) -> int:
        return len(self.list_pending())

    # --- Internal helpers -----------------------------------------------------

    def _list_by_status(self, status: OrderStatus) -> list[Order]:
        return [order for order in self._orders if order.status == status]
