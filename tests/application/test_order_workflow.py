"""Integration tests for checkout.

Uses the in-memory fake repository, no I/O.
"""

import pytest

from storefront.application.order_workflow import OrderWorkflow
from storefront.application.product_registry import ProductRegistry
from storefront.domain.exceptions import EmptyCartError, ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


def _setup():
    """Registry with two products, an empty cart and a fresh workflow."""
    repo = FakeProductRepository()
    registry = ProductRegistry(repo)
    shirt = registry.create("Shirt", "Clothing", "500")
    mug = registry.create("Mug", "Home", "249.50")
    return OrderWorkflow(), Cart(repo), shirt, mug


class TestPlaceOrderHappyPath:

    def test_clears_cart_and_returns_summary(self):
        workflow, cart, shirt, mug = _setup()
        cart.add(shirt, 2)
        cart.add(mug, 1)
        expected_total = cart.total()

        order = workflow.place_order(cart, "12 MG Road, Pune")

        assert cart.snapshot() == ()
        assert order.total == expected_total == Money.of("1249.50")
        assert order.delivery_address == "12 MG Road, Pune"
        assert [i.product_name for i in order.items] == ["Shirt", "Mug"]

    def test_order_is_placed_and_workflow_reopens(self):
        workflow, cart, shirt, _ = _setup()
        cart.add(shirt, 1)
        order = workflow.place_order(cart, "Pune")
        assert order.status == OrderStatus.PLACED
        assert workflow.status == OrderStatus.OPEN

    def test_cart_usable_after_checkout(self):
        workflow, cart, shirt, mug = _setup()
        cart.add(shirt, 1)
        workflow.place_order(cart, "Pune")

        cart.add(mug, 3)

        assert len(cart) == 1
        assert cart.total() == Money.of("748.50")

    def test_sequential_order_numbers(self):
        workflow, cart, shirt, _ = _setup()
        cart.add(shirt, 1)
        first = workflow.place_order(cart, "Pune")
        cart.add(shirt, 1)
        second = workflow.place_order(cart, "Mumbai")
        assert second.number == first.number + 1
        assert workflow.orders_placed == 2

    def test_to_dto_formats_values(self):
        workflow, cart, shirt, _ = _setup()
        cart.add(shirt, 3)
        dto = OrderWorkflow.to_dto(workflow.place_order(cart, "Pune"))
        assert dto.status == "PLACED"
        assert dto.total == "₹1500.00"
        assert dto.items[0].line_total == "₹1500.00"


class TestPlaceOrderValidation:

    def test_empty_cart_rejected(self):
        workflow, cart, _, _ = _setup()
        with pytest.raises(EmptyCartError):
            workflow.place_order(cart, "Pune")
        assert workflow.orders_placed == 0

    def test_blank_address_leaves_cart_unchanged(self):
        workflow, cart, shirt, mug = _setup()
        cart.add(shirt, 1)
        cart.add(mug, 2)
        before = cart.snapshot()

        with pytest.raises(ValidationError, match="delivery address"):
            workflow.place_order(cart, "")

        assert cart.snapshot() == before
        assert len(cart) == 2
        assert workflow.orders_placed == 0

    def test_whitespace_address_rejected(self):
        workflow, cart, shirt, _ = _setup()
        cart.add(shirt, 1)
        with pytest.raises(ValidationError):
            workflow.place_order(cart, "   ")
        assert len(cart) == 1
