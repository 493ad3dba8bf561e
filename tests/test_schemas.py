import pytest
from pydantic import ValidationError

from storefront.schemas import CartLine, Product

def test_sizes_default_when_missing_null_or_empty():
    for raw in ({}, {"sizes": None}, {"sizes": []}):
        p = Product.model_validate({"id": 1, "title": "Tee", "price": 5, **raw})
        assert p.sizes == ["S", "M", "L"]

def test_sizes_kept_in_order():
    p = Product.model_validate({"id": "a", "title": "Cap", "price": 5, "sizes": ["XL", "M"]})
    assert p.sizes == ["XL", "M"]

def test_negative_price_rejected():
    with pytest.raises(ValidationError):
        Product.model_validate({"id": 1, "title": "Tee", "price": -1})

def test_unknown_backend_fields_ignored():
    p = Product.model_validate({"id": 1, "title": "Tee", "price": 1, "rating": 4.5, "_id": "x"})
    assert not hasattr(p, "rating")

def test_products_are_immutable(tee):
    with pytest.raises(ValidationError):
        tee.title = "Other"

def test_cart_line_snapshot(tee):
    line = CartLine.from_product(tee)
    assert (line.product_id, line.title, line.price, line.image) == (1, "Tee", 20.0, None)
    assert line.sizes == ["S", "M", "L"]
