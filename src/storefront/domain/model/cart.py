"""Cart aggregate.

The cart owns an ordered list of entries. Entries are positional: the
cart is addressed by index, never by product, and adding a product that
is already in the cart appends a second, independent entry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from storefront.domain.exceptions import OutOfRangeError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartEntry:
    """A product reference plus how many units the customer wants."""

    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


class Cart:
    """Ordered, positional list of cart entries.

    Only products held by ``product_repo`` may be added, so every entry
    refers to a product the registry knows about.
    """

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo
        self._entries: list[CartEntry] = []

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product, quantity: int) -> CartEntry:
        """Append a new entry; never merges with an existing one."""
        qty = Quantity(quantity)
        if not isinstance(product, Product) or not self._product_repo.contains(product):
            raise ValidationError("Product is not in the catalog")

        entry = CartEntry(product=product, quantity=qty)
        self._entries.append(entry)
        logger.info("Added %s x %s to cart", qty, product.name)
        return entry

    def remove_at(self, position: int) -> None:
        """Remove the entry at ``position``; later entries shift down by one."""
        if (
            isinstance(position, bool)
            or not isinstance(position, int)
            or not 0 <= position < len(self._entries)
        ):
            raise OutOfRangeError(
                f"No cart entry at position {position!r} "
                f"(cart has {len(self._entries)} entries)"
            )
        entry = self._entries.pop(position)
        logger.info("Removed %s x %s from cart", entry.quantity, entry.product.name)

    def clear(self) -> None:
        self._entries.clear()

    # --- Queries --------------------------------------------------------------

    def snapshot(self) -> tuple[CartEntry, ...]:
        return tuple(self._entries)

    def total(self) -> Money:
        result = Money.zero()
        for entry in self._entries:
            result = result + entry.line_total
        return result

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)
