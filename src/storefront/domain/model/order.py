"""Placed-order summary.

An Order is produced once, at checkout, and never changes afterwards.
Line items copy what they need from the product so the summary stays
valid after the cart it came from has been cleared.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import EmptyCartError, ValidationError
from storefront.domain.model.cart import CartEntry
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    OPEN = "OPEN"
    PLACED = "PLACED"


@dataclass(frozen=True)
class OrderLineItem:
    """Snapshot of a cart entry at checkout time."""

    product_name: str
    category: str
    unit_price: Money
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @staticmethod
    def from_entry(entry: CartEntry) -> OrderLineItem:
        return OrderLineItem(
            product_name=entry.product.name,
            category=entry.product.category,
            unit_price=entry.product.price,
            quantity=entry.quantity,
        )


@dataclass(frozen=True)
class Order:
    """Immutable summary of a placed order.

    Use the ``Order.place()`` factory; it enforces the checkout rules.
    """

    number: int
    items: tuple[OrderLineItem, ...]
    total: Money
    delivery_address: str
    status: OrderStatus = OrderStatus.PLACED
    placed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def place(
        number: int,
        entries: tuple[CartEntry, ...],
        delivery_address: str,
    ) -> Order:
        """Build the summary, enforcing all checkout invariants.

        The empty-cart check comes first so that an empty cart with a
        blank address reports the empty cart.
        """
        if not entries:
            raise EmptyCartError("Your cart is empty!")

        if not isinstance(delivery_address, str) or not delivery_address.strip():
            raise ValidationError("Please enter delivery address!")

        items = tuple(OrderLineItem.from_entry(entry) for entry in entries)
        total = Money.zero()
        for item in items:
            total = total + item.line_total

        return Order(
            number=number,
            items=items,
            total=total,
            delivery_address=delivery_address.strip(),
        )
