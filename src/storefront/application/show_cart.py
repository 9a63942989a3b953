"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.dto import CartLineDTO, CartViewDTO
from storefront.domain.model.cart import Cart


class ShowCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self) -> CartViewDTO:
        return CartViewDTO(
            lines=[
                CartLineDTO(
                    position=position,
                    product_name=entry.product.name,
                    category=entry.product.category,
                    unit_price=str(entry.product.price),
                    quantity=entry.quantity.value,
                    line_total=str(entry.line_total),
                )
                for position, entry in enumerate(self._cart.snapshot())
            ],
            total=str(self._cart.total()),
        )
