"""Product record.

Products have no identity and no lifecycle beyond creation: once the
registry accepts one it never changes and is never removed.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True, eq=False)
class Product:
    """A product in the catalog.

    Compared by identity (``eq=False``): two products with identical
    fields are still two separate catalog entries, and the cart checks
    membership by reference.
    """

    name: str
    category: str
    price: Money
    image_reference: str = ""
    visible: bool = True
