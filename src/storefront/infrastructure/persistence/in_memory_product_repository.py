"""Process-lifetime, list-backed implementation of ProductRepository."""

from __future__ import annotations

from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: list[Product] = list(products or [])

    # --- ProductRepository interface ------------------------------------------

    def add(self, product: Product) -> None:
        self._products.append(product)

    def list_all(self) -> list[Product]:
        return list(self._products)

    def contains(self, product: Product) -> bool:
        return any(p is product for p in self._products)
