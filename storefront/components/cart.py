from html import escape
from typing import Sequence

from storefront.schemas import CartLine
from storefront.services.cart import cart_total

def render_cart(lines: Sequence[CartLine], checkout_action: str, remove_action: str) -> str:
    """
    `remove_action` is a template with an `{index}` placeholder.
    Total is recomputed from `lines` on every render.
    """
    if not lines:
        body = '<p class="empty">No items yet</p>'
    else:
        rows = []
        for idx, it in enumerate(lines):
            img = f'<img src="{escape(it.image)}" alt="" />' if it.image else ""
            rows.append(
                f'<li>{img}<span class="title">{escape(it.title)}</span>'
                f'<span class="price">${it.price:.2f}</span>'
                f'<form method="post" action="{escape(remove_action.format(index=idx))}">'
                f'<button type="submit" class="remove">Remove</button></form></li>'
            )
        body = f'<ul class="lines">{"".join(rows)}</ul>'
    disabled = "" if lines else " disabled"
    return f"""
<aside class="cart">
  <h4>Your Cart</h4>
  {body}
  <div class="row"><span>Total</span><span class="total">${cart_total(lines):.2f}</span></div>
  <form method="post" action="{escape(checkout_action)}">
    <button type="submit" class="checkout"{disabled}>Checkout</button>
  </form>
</aside>"""
