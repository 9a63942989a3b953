"""Integration tests for the product registry.

Uses the in-memory fake repository.
"""

from decimal import Decimal

import pytest

from storefront.application.product_registry import ProductRegistry
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


def _setup():
    repo = FakeProductRepository()
    return ProductRegistry(repo), repo


class TestCreateHappyPath:

    def test_creates_and_stores_product(self):
        registry, repo = _setup()
        product = registry.create("Shirt", "Clothing", 500, "img.png", True)
        assert product.name == "Shirt"
        assert product.category == "Clothing"
        assert product.price == Money.of("500")
        assert product.image_reference == "img.png"
        assert product.visible is True
        assert repo.list_all() == [product]

    def test_fields_are_stripped(self):
        registry, _ = _setup()
        product = registry.create("  Shirt ", " Clothing ", " 499.99 ", " img.png ")
        assert product.name == "Shirt"
        assert product.category == "Clothing"
        assert product.price.amount == Decimal("499.99")
        assert product.image_reference == "img.png"

    def test_free_product_accepted(self):
        registry, _ = _setup()
        assert registry.create("Sticker", "Misc", "0").price == Money.zero()

    def test_existing_products_untouched(self):
        registry, _ = _setup()
        first = registry.create("Shirt", "Clothing", 500)
        registry.create("Shirt", "Clothing", 600)
        assert registry.list_all()[0] is first
        assert first.price == Money.of("500")
        assert len(registry.list_all()) == 2


class TestCreateValidation:

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_rejected(self, name):
        registry, repo = _setup()
        with pytest.raises(ValidationError, match="name is required"):
            registry.create(name, "Clothing", 500)
        assert repo.list_all() == []

    @pytest.mark.parametrize("category", ["", "\t"])
    def test_blank_category_rejected(self, category):
        registry, repo = _setup()
        with pytest.raises(ValidationError, match="category is required"):
            registry.create("Shirt", category, 500)
        assert repo.list_all() == []

    @pytest.mark.parametrize("price", ["", "abc", "-1", -0.01, "9e999999", "1000000000.01"])
    def test_bad_price_rejected(self, price):
        registry, repo = _setup()
        with pytest.raises(ValidationError):
            registry.create("Shirt", "Clothing", price)
        assert repo.list_all() == []


class TestListVisible:

    def test_includes_product_iff_visible(self):
        registry, _ = _setup()
        shown = registry.create("Shirt", "Clothing", 500, visible=True)
        hidden = registry.create("Secret", "Clothing", 900, visible=False)
        visible = registry.list_visible()
        assert shown in visible
        assert hidden not in visible

    def test_reflects_later_creates(self):
        registry, _ = _setup()
        assert registry.list_visible() == []
        a = registry.create("A", "X", 1)
        b = registry.create("B", "Y", 2)
        assert registry.list_visible() == [a, b]

    def test_list_all_includes_hidden(self):
        registry, _ = _setup()
        hidden = registry.create("Secret", "Clothing", 900, visible=False)
        assert registry.list_all() == [hidden]
        assert registry.contains(hidden)
