from typing import List, Optional
import pytest

from storefront.schemas import OrderRequest, Product
from storefront.services.api_client import BackendError
from storefront.services.store import Store

TEE = {"id": 1, "title": "Tee", "price": 20, "description": "red"}

class FakeBackend:
    """In-memory stand-in for BackendClient; records every call in order."""
    def __init__(self, products: Optional[List[dict]] = None, *, fail_list: bool = False,
                 fail_seed: bool = False, fail_order: bool = False,
                 seeded: Optional[List[dict]] = None):
        self.products = [Product.model_validate(p) for p in (products or [])]
        self.seeded = [Product.model_validate(p) for p in (seeded or [])]
        self.fail_list = fail_list
        self.fail_seed = fail_seed
        self.fail_order = fail_order
        self.calls: List[str] = []
        self.orders: List[OrderRequest] = []

    async def list_products(self) -> List[Product]:
        self.calls.append("GET /products")
        if self.fail_list:
            raise BackendError("GET", "/products", status=500)
        return list(self.products)

    async def seed(self) -> None:
        self.calls.append("POST /seed")
        if self.fail_seed:
            raise BackendError("POST", "/seed", status=503)
        self.products = list(self.seeded)
        self.fail_list = False

    async def create_order(self, order: OrderRequest) -> None:
        self.calls.append("POST /orders")
        if self.fail_order:
            raise BackendError("POST", "/orders", status=400)
        self.orders.append(order)

@pytest.fixture
def tee() -> Product:
    return Product.model_validate(TEE)

@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend([TEE])

@pytest.fixture
def store(backend) -> Store:
    return Store(backend)
