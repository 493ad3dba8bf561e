from __future__ import annotations
from datetime import date
from html import escape
from typing import Optional, Sequence
import json

from storefront.schemas import CartLine, Notice, Product, UIState
from storefront.components.header import BRAND, render_header
from storefront.components.product_card import render_product_grid
from storefront.components.cart import render_cart

# Routes the components emit their events to
SEARCH_ACTION = "/ui/products"
ADD_ACTION = "/ui/cart"
REMOVE_ACTION = "/ui/cart/{index}/remove"
CHECKOUT_ACTION = "/ui/checkout"
SEED_ACTION = "/ui/seed"

_SCRIPT = """
function storefrontSearch(el) {
  fetch(el.dataset.action + "?q=" + encodeURIComponent(el.value))
    .then(function (r) { return r.text(); })
    .then(function (html) { document.getElementById("product-grid").outerHTML = html; });
}
"""

def _notice_script(notice: Optional[Notice]) -> str:
    if notice is None:
        return ""
    # blocking acknowledgment, same as a browser alert()
    msg = json.dumps(notice.message).replace("</", "<\\/")
    return f'<script>window.addEventListener("load", function () {{ alert({msg}); }});</script>'

def render_page(*, products: Sequence[Product], cart: Sequence[CartLine], ui: UIState,
                query: str = "", notice: Optional[Notice] = None,
                status_url: str = "/test") -> str:
    status = ""
    if ui.loading:
        status += '<p class="loading">Loading products...</p>'
    if ui.error:
        status += f'<p class="error">{escape(ui.error)}</p>'
    return f"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<title>{escape(BRAND)}</title>
<script>{_SCRIPT}</script>
{_notice_script(notice)}
</head>
<body>
{render_header(SEARCH_ACTION, query)}
<main>
  <section class="catalog">
    <div class="row">
      <h2>New Arrivals</h2>
      <form method="post" action="{SEED_ACTION}"><button type="submit">Seed Demo Data</button></form>
      <a href="{escape(status_url)}" target="_blank" rel="noopener">Backend Status</a>
    </div>
    {status}
    {render_product_grid(products, ADD_ACTION)}
  </section>
  {render_cart(cart, CHECKOUT_ACTION, REMOVE_ACTION)}
</main>
<footer><span>&copy; {date.today().year} {escape(BRAND)}</span></footer>
</body>
</html>"""
