"""Application service: the product registry.

Handles the admin "Add Product" form and answers catalog queries.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def _required(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Product {field_name} is required")
    return value.strip()


class ProductRegistry:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def create(
        self,
        name: str,
        category: str,
        price: str | float | int | Decimal,
        image_reference: str = "",
        visible: bool = True,
    ) -> Product:
        """Validate the form fields and append a new product.

        Nothing is stored unless every field is valid.
        """
        product = Product(
            name=_required(name, "name"),
            category=_required(category, "category"),
            price=Money.of(price),
            image_reference=str(image_reference or "").strip(),
            visible=bool(visible),
        )
        self._product_repo.add(product)
        logger.info(
            "Product '%s' added to '%s' at %s (visible=%s)",
            product.name, product.category, product.price, product.visible,
        )
        return product

    def list_visible(self) -> list[Product]:
        return [p for p in self._product_repo.list_all() if p.visible]

    def list_all(self) -> list[Product]:
        return self._product_repo.list_all()

    def contains(self, product: Product) -> bool:
        return self._product_repo.contains(product)
