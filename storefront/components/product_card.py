from html import escape
from typing import Sequence

from storefront.schemas import DEFAULT_SIZES, Product

def render_product_card(p: Product, add_action: str) -> str:
    # NOTE: the size <select> is display-only; add posts just the product id
    sizes = p.sizes or DEFAULT_SIZES
    options = "".join(f"<option>{escape(s)}</option>" for s in sizes)
    img = f'<img src="{escape(p.image)}" alt="{escape(p.title)}" />' if p.image else ""
    return f"""
<div class="product-card" data-id="{escape(str(p.id))}">
  {img}
  <div class="body">
    <div class="row"><h3>{escape(p.title)}</h3><span class="price">${p.price:.2f}</span></div>
    <p class="description">{escape(p.description or "")}</p>
    <form method="post" action="{escape(add_action)}" class="row">
      <select name="size">{options}</select>
      <input type="hidden" name="product_id" value="{escape(str(p.id))}" />
      <button type="submit">Add</button>
    </form>
  </div>
</div>"""

def render_product_grid(products: Sequence[Product], add_action: str) -> str:
    cards = "".join(render_product_card(p, add_action) for p in products)
    return f'<div id="product-grid" class="grid">{cards}</div>'
