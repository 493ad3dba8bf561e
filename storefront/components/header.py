from html import escape

BRAND = "MK Clothing"

def render_header(search_action: str, query: str = "") -> str:
    """
    Branding + search box. Each keystroke sends the raw input value to
    `search_action` and swaps the product grid with the response.
    """
    return f"""
<header class="site-header">
  <div class="brand"><span class="logo">MK</span><span class="name">{escape(BRAND)}</span></div>
  <input id="search" type="search" placeholder="Search products..." value="{escape(query)}"
         data-action="{escape(search_action)}"
         oninput="storefrontSearch(this)" />
</header>"""
