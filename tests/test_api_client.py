import asyncio
import pytest
import requests

from storefront.schemas import GUEST, OrderItem, OrderRequest
from storefront.services.api_client import BackendClient, BackendError

class FakeResponse:
    def __init__(self, status_code=200, body=None, bad_json=False):
        self.status_code = status_code
        self._body = body
        self._bad_json = bad_json

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._bad_json:
            raise ValueError("not json")
        return self._body

@pytest.fixture
def sent(monkeypatch):
    """Patch Session.request; returns the list of recorded calls and a setter for the reply."""
    calls = []
    reply = {"resp": FakeResponse(200, [])}

    def fake_request(self, method, url, **kw):
        calls.append((method, url, kw))
        r = reply["resp"]
        if isinstance(r, Exception):
            raise r
        return r

    monkeypatch.setattr(requests.Session, "request", fake_request)
    return calls, reply

def test_list_products(sent):
    calls, reply = sent
    reply["resp"] = FakeResponse(200, [{"id": 1, "title": "Tee", "price": 20, "sizes": None}])
    products = asyncio.run(BackendClient("http://api.test/").list_products())
    assert calls[0][:2] == ("GET", "http://api.test/products")
    assert calls[0][2]["timeout"] is None
    assert products[0].title == "Tee"
    assert products[0].sizes == ["S", "M", "L"]

def test_non_2xx_raises(sent):
    _, reply = sent
    reply["resp"] = FakeResponse(500)
    with pytest.raises(BackendError) as ei:
        asyncio.run(BackendClient("http://api.test").list_products())
    assert ei.value.status == 500
    assert str(ei.value) == "GET /products: HTTP 500"

def test_network_error_raises(sent):
    _, reply = sent
    reply["resp"] = requests.ConnectionError("refused")
    with pytest.raises(BackendError) as ei:
        asyncio.run(BackendClient("http://api.test").seed())
    assert ei.value.status is None
    assert ei.value.path == "/seed"

@pytest.mark.parametrize("resp", [FakeResponse(200, bad_json=True),
                                  FakeResponse(200, {"items": []}),
                                  FakeResponse(200, [{"title": "no id"}])])
def test_unusable_body_raises(sent, resp):
    _, reply = sent
    reply["resp"] = resp
    with pytest.raises(BackendError):
        asyncio.run(BackendClient("http://api.test").list_products())

def test_seed_posts_without_body(sent):
    calls, _ = sent
    asyncio.run(BackendClient("http://api.test").seed())
    method, url, kw = calls[0]
    assert (method, url) == ("POST", "http://api.test/seed")
    assert "json" not in kw and "data" not in kw

def test_create_order_posts_json(sent):
    calls, _ = sent
    order = OrderRequest(items=[OrderItem(product_id=1, title="Tee", price=20, size="S")],
                         customer=GUEST, total=20)
    asyncio.run(BackendClient("http://api.test", timeout=3).create_order(order))
    method, url, kw = calls[0]
    assert (method, url) == ("POST", "http://api.test/orders")
    assert kw["timeout"] == 3
    assert kw["json"]["status"] == "pending"
    assert kw["json"]["items"][0]["quantity"] == 1

def test_status_url():
    assert BackendClient("http://api.test/").status_url() == "http://api.test/test"
