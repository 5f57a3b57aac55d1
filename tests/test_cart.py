"""
Unit tests for cart operations and totals.
"""

import pytest

from pura.errors import NotFoundError
from pura.schemas import CartState, Product
from pura.services import cart


def _product(id: str, price: float) -> Product:
    return Product(id=id, name=f"Product {id}", price=price)


SERUM = _product("serum", 10.0)
CREAM = _product("cream", 20.0)


class TestCartOperations:
    def test_add_merges_by_id(self):
        state = cart.add_to_cart(CartState(), SERUM)
        state = cart.add_to_cart(state, SERUM, quantity=2)
        assert len(state.items) == 1
        assert state.items[0].quantity == 3

    def test_bundle_flag_is_sticky(self):
        state = cart.add_bundle_to_cart(CartState(), [SERUM])
        state = cart.add_to_cart(state, SERUM)
        assert state.items[0].is_bundle
        assert state.items[0].quantity == 2

    def test_individual_item_becomes_bundle(self):
        state = cart.add_to_cart(CartState(), CREAM)
        state = cart.add_bundle_to_cart(state, [CREAM])
        assert state.items[0].is_bundle

    def test_update_quantity(self):
        state = cart.add_to_cart(CartState(), SERUM)
        state = cart.update_quantity(state, "serum", 5)
        assert state.items[0].quantity == 5

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_update_to_zero_removes(self, quantity):
        state = cart.add_to_cart(CartState(), SERUM)
        state = cart.update_quantity(state, "serum", quantity)
        assert state.items == []

    @pytest.mark.parametrize("quantity", [2, 0, -1])
    def test_update_missing_item(self, quantity):
        state = cart.add_to_cart(CartState(), CREAM)
        with pytest.raises(NotFoundError):
            cart.update_quantity(state, "serum", quantity)
        assert [i.id for i in state.items] == ["cream"]

    def test_remove(self):
        state = cart.add_bundle_to_cart(CartState(), [SERUM, CREAM])
        state = cart.remove_from_cart(state, "serum")
        assert [i.id for i in state.items] == ["cream"]

    def test_clear_resets_packaging_name(self):
        state = cart.set_custom_packaging_name(cart.add_to_cart(CartState(), SERUM), " Anna's Glow Kit ")
        assert state.custom_packaging_name == "Anna's Glow Kit"
        state = cart.clear_cart(state)
        assert state.items == []
        assert state.custom_packaging_name == ""

    def test_cart_item_keeps_product_fields(self):
        product = Product(id="p", name="Mask", price=42, category="Masks", ingredients=["Clay"])
        item = cart.add_to_cart(CartState(), product).items[0]
        assert (item.name, item.category, item.ingredients) == ("Mask", "Masks", ["Clay"])


class TestTotals:
    def test_empty_cart(self):
        summary = cart.summarize(CartState())
        assert (summary.total_items, summary.subtotal, summary.bundle_discount, summary.total) == (0, 0, 0, 0)

    def test_discount_applies_to_bundle_items_only(self):
        state = cart.add_to_cart(CartState(), SERUM, quantity=2)
        state = cart.add_bundle_to_cart(state, [CREAM])

        assert cart.total_items(state) == 3
        assert cart.subtotal(state) == pytest.approx(40.0)
        assert cart.bundle_discount(state) == pytest.approx(3.0)
        assert cart.total_price(state) == pytest.approx(37.0)

    def test_custom_rate(self):
        state = cart.add_bundle_to_cart(CartState(), [CREAM])
        assert cart.total_price(state, rate=0.5) == pytest.approx(10.0)

    def test_total_never_negative(self):
        state = cart.add_bundle_to_cart(CartState(), [CREAM])
        assert cart.total_price(state, rate=2.0) == 0.0

    def test_summary_is_rounded(self):
        state = cart.add_bundle_to_cart(CartState(), [_product("a", 22.99), _product("b", 29.99)])
        summary = cart.summarize(state)
        assert summary.subtotal == pytest.approx(52.98)
        assert summary.bundle_discount == pytest.approx(7.95)
        assert summary.total == pytest.approx(45.03)

    def test_quote_routine(self):
        quote = cart.quote_routine([_product("a", 22.99), _product("b", 29.99)])
        assert quote.product_count == 2
        assert quote.original_total == pytest.approx(52.98)
        assert quote.discount == pytest.approx(7.95)
        assert quote.final_total == pytest.approx(45.03)
