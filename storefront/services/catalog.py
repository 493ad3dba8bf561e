from typing import List, Sequence
from storefront.schemas import Product

def _haystack(p: Product) -> str:
    return f"{p.title} {p.description or ''}".lower()

def filter_products(catalog: Sequence[Product], query: str) -> List[Product]:
    """
    Substring search over "title description", case-insensitive.
    Always runs against the full catalog; returned items are the catalog's own
    objects, in catalog order. An empty query matches everything.
    """
    q = (query or "").lower()
    if not q:
        return list(catalog)
    return [p for p in catalog if q in _haystack(p)]
