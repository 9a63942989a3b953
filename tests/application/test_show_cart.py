"""Tests for the cart query used by the cart screen."""

from storefront.application.show_cart import ShowCartHandler
from storefront.domain.model.cart import Cart
from tests.fakes import FakeProductRepository, make_product


def test_empty_cart_view():
    view = ShowCartHandler(Cart(FakeProductRepository())).handle()
    assert view.lines == []
    assert view.total == "₹0.00"


def test_lines_carry_positions_and_formatted_totals():
    shirt = make_product("Shirt", price="500")
    hat = make_product("Hat", price="99.50")
    cart = Cart(FakeProductRepository([shirt, hat]))
    cart.add(shirt, 2)
    cart.add(hat, 1)
    cart.add(shirt, 1)

    view = ShowCartHandler(cart).handle()

    assert [line.position for line in view.lines] == [0, 1, 2]
    assert view.lines[0].line_total == "₹1000.00"
    assert view.lines[1].unit_price == "₹99.50"
    assert view.total == "₹1599.50"
