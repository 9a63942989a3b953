"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Each call builds a fresh, independent set of state objects; nothing is
kept at module level.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.application.catalog_view import CatalogViewModel
from storefront.application.order_workflow import OrderWorkflow
from storefront.application.product_registry import ProductRegistry
from storefront.domain.model.cart import Cart
from storefront.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)

# (name, category, price, image reference, visible)
DEMO_PRODUCTS = [
    ("Shirt", "Clothing", "500", "images/shirt.png", True),
    ("Jeans", "Clothing", "1200", "images/jeans.png", True),
    ("Headphones", "Electronics", "2499.99", "https://example.com/headphones.png", True),
    ("Prototype Phone", "Electronics", "19999", "", False),
    ("Coffee Mug", "Home", "249.50", "images/mug.png", True),
]


@dataclass
class StorefrontContext:
    registry: ProductRegistry
    cart: Cart
    catalog: CatalogViewModel
    workflow: OrderWorkflow


def build_context(seed: bool = False) -> StorefrontContext:
    product_repo = InMemoryProductRepository()
    registry = ProductRegistry(product_repo)
    if seed:
        for name, category, price, image, visible in DEMO_PRODUCTS:
            registry.create(name, category, price, image, visible)

    return StorefrontContext(
        registry=registry,
        cart=Cart(product_repo),
        catalog=CatalogViewModel(),
        workflow=OrderWorkflow(),
    )
