"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry pre-formatted values from the application layer to the CLI
so the screens never format money themselves.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductCardDTO:
    """A product as shown on the customer screen."""

    name: str
    price: str  # formatted, e.g. "₹500.00"
    image_reference: str


@dataclass(frozen=True)
class CategorySectionDTO:
    """One titled group of product cards."""

    category: str
    cards: list[ProductCardDTO]


@dataclass(frozen=True)
class CartLineDTO:
    """A single cart row, including its position for removal."""

    position: int
    product_name: str
    category: str
    unit_price: str
    quantity: int
    line_total: str


@dataclass(frozen=True)
class CartViewDTO:
    lines: list[CartLineDTO]
    total: str


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a placed order as displayed to the user."""

    number: int
    status: str
    items: list[OrderLineItemDTO]
    total: str
    delivery_address: str
    placed_at: str
