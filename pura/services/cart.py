"""
Cart operations over an explicit CartState.

Line items are merged by product id. Items added from a quiz routine are
flagged ``is_bundle`` and get the flat bundle discount.
"""

import logging
from typing import Iterable, Optional

from pura.config import get_settings
from pura.errors import NotFoundError
from pura.schemas import CartItem, CartState, CartSummary, Product, RoutineQuote

logger = logging.getLogger(__name__)


def _rate(rate: Optional[float]) -> float:
    return get_settings().bundle_discount_rate if rate is None else rate


def add_to_cart(cart: CartState, product: Product, is_bundle: bool = False, quantity: int = 1) -> CartState:
    for i, item in enumerate(cart.items):
        if item.id == product.id:
            cart.items[i] = item.model_copy(
                update={
                    "quantity": item.quantity + quantity,
                    "is_bundle": is_bundle or item.is_bundle,
                }
            )
            return cart
    fields = product.model_dump(exclude={"quantity", "is_bundle"})
    cart.items.append(CartItem(**fields, quantity=quantity, is_bundle=is_bundle))
    return cart


def add_bundle_to_cart(cart: CartState, products: Iterable[Product]) -> CartState:
    for product in products:
        add_to_cart(cart, product, is_bundle=True)
    return cart


def remove_from_cart(cart: CartState, product_id: str) -> CartState:
    cart.items = [item for item in cart.items if item.id != product_id]
    return cart


def update_quantity(cart: CartState, product_id: str, quantity: int) -> CartState:
    """Set an item's quantity; zero or less removes it. The item must be in the cart."""
    for i, item in enumerate(cart.items):
        if item.id == product_id:
            break
    else:
        raise NotFoundError(f"Product not in cart: {product_id}")

    if quantity <= 0:
        return remove_from_cart(cart, product_id)
    cart.items[i] = item.model_copy(update={"quantity": quantity})
    return cart


def clear_cart(cart: CartState) -> CartState:
    cart.items = []
    cart.custom_packaging_name = ""
    return cart


def set_custom_packaging_name(cart: CartState, name: str) -> CartState:
    cart.custom_packaging_name = name.strip()
    return cart


# ── Totals ──────────────────────────────────────────────────────────────────


def total_items(cart: CartState) -> int:
    return sum(item.quantity for item in cart.items)


def subtotal(cart: CartState) -> float:
    return sum(item.price * item.quantity for item in cart.items)


def bundle_discount(cart: CartState, rate: Optional[float] = None) -> float:
    bundle_subtotal = sum(item.price * item.quantity for item in cart.items if item.is_bundle)
    return bundle_subtotal * _rate(rate)


def total_price(cart: CartState, rate: Optional[float] = None) -> float:
    return max(0.0, subtotal(cart) - bundle_discount(cart, rate))


def summarize(cart: CartState, rate: Optional[float] = None) -> CartSummary:
    return CartSummary(
        items=list(cart.items),
        custom_packaging_name=cart.custom_packaging_name,
        total_items=total_items(cart),
        subtotal=round(subtotal(cart), 2),
        bundle_discount=round(bundle_discount(cart, rate), 2),
        total=round(total_price(cart, rate), 2),
    )


def quote_routine(products: list[Product], rate: Optional[float] = None) -> RoutineQuote:
    """Price a routine as a bundle before it is added."""
    original = sum(p.price for p in products)
    discount = original * _rate(rate)
    return RoutineQuote(
        products=products,
        product_count=len(products),
        original_total=round(original, 2),
        discount=round(discount, 2),
        final_total=round(original - discount, 2),
    )
