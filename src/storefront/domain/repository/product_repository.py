"""Abstract repository for products.

Defined in the domain layer so the cart can check product membership
without depending on infrastructure. The in-memory implementation lives
in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def add(self, product: Product) -> None:
        """Append a product; existing entries are never touched."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""

    @abstractmethod
    def contains(self, product: Product) -> bool:
        """Return True if this exact product object is stored."""
