"""Application service: customer catalog view model.

The view model does not watch the registry. Whoever mutates the
registry calls ``rebuild`` again with the current product list.
"""

from __future__ import annotations

from collections.abc import Iterable

from storefront.application.dto import CategorySectionDTO, ProductCardDTO
from storefront.domain.model.product import Product


class CatalogViewModel:

    def rebuild(self, products: Iterable[Product]) -> dict[str, list[Product]]:
        """Group visible products by category.

        Categories appear in the order they were first seen, and products
        keep their input order within a category.
        """
        grouped: dict[str, list[Product]] = {}
        for product in products:
            if not product.visible:
                continue
            grouped.setdefault(product.category, []).append(product)
        return grouped

    def sections(self, products: Iterable[Product]) -> list[CategorySectionDTO]:
        return self.to_sections(self.rebuild(products))

    @staticmethod
    def to_sections(grouped: dict[str, list[Product]]) -> list[CategorySectionDTO]:
        """Map an already-built grouping to display DTOs."""
        return [
            CategorySectionDTO(
                category=category,
                cards=[
                    ProductCardDTO(
                        name=p.name,
                        price=str(p.price),
                        image_reference=p.image_reference,
                    )
                    for p in members
                ],
            )
            for category, members in grouped.items()
        ]
