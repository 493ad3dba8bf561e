from .header import render_header
from .product_card import render_product_card, render_product_grid
from .cart import render_cart
from .page import render_page

__all__ = [
    "render_header",
    "render_product_card",
    "render_product_grid",
    "render_cart",
    "render_page",
]
