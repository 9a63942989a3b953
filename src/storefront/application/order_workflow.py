"""Application service: checkout.

The workflow has two states. It is OPEN while the customer fills the
cart; a successful checkout produces a PLACED order and the workflow is
OPEN again straight away, with an empty cart.
"""

from __future__ import annotations

import logging

from storefront.application.dto import OrderDTO, OrderLineItemDTO
from storefront.domain.exceptions import DomainException
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order, OrderStatus

logger = logging.getLogger(__name__)


class OrderWorkflow:

    def __init__(self) -> None:
        self._orders_placed = 0

    @property
    def status(self) -> OrderStatus:
        return OrderStatus.OPEN

    @property
    def orders_placed(self) -> int:
        return self._orders_placed

    def place_order(self, cart: Cart, delivery_address: str) -> Order:
        """Validate and finalize the cart.

        Steps:
        1. Let the Order factory check the cart and the address.
        2. Clear the cart only once the summary exists.

        A rejected checkout never touches the cart.
        """
        try:
            order = Order.place(
                number=self._orders_placed + 1,
                entries=cart.snapshot(),
                delivery_address=delivery_address,
            )
        except DomainException as exc:
            logger.warning("Checkout rejected: %s", exc)
            raise

        cart.clear()
        self._orders_placed += 1
        logger.info(
            "Order #%d placed: %d items, total %s, delivering to %s",
            order.number, len(order.items), order.total, order.delivery_address,
        )
        return order

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def to_dto(order: Order) -> OrderDTO:
        return OrderDTO(
            number=order.number,
            status=order.status.value,
            items=[
                OrderLineItemDTO(
                    product_name=item.product_name,
                    quantity=item.quantity.value,
                    unit_price=str(item.unit_price),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            total=str(order.total),
            delivery_address=order.delivery_address,
            placed_at=order.placed_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
