from __future__ import annotations
from typing import Any, Dict, List, Optional, Protocol, Union
import logging
import uuid

from storefront.schemas import Notice, OrderRequest, Product, UIState
from storefront.services.api_client import BackendError
from storefront.services.cart import Cart, add_line, build_order, cart_total, remove_line
from storefront.services.catalog import filter_products

logger = logging.getLogger(__name__)

LOAD_ERROR = "Unable to fetch products. Try clicking Seed Demo Data below."
ORDER_PLACED = "Order placed!"
CHECKOUT_FAILED = "Checkout failed"

class Backend(Protocol):
    async def list_products(self) -> List[Product]: ...
    async def seed(self) -> None: ...
    async def create_order(self, order: OrderRequest) -> None: ...

class Visitor:
    """One browser's local UI state: search query, cart, pending notice."""
    def __init__(self, visitor_id: str):
        self.id = visitor_id
        self.query: str = ""
        self.cart: Cart = ()
        self.notice: Optional[Notice] = None

    @property
    def total(self) -> float:
        return cart_total(self.cart)

    def pop_notice(self) -> Optional[Notice]:
        n, self.notice = self.notice, None
        return n

class Store:
    """
    Root controller: owns the shared catalog + load state and the per-visitor
    states, and is the only caller of the backend.
    - Every write swaps a whole value (new list / new tuple / new UIState).
    - The filtered view and cart total are computed on read, never stored.
    - Only the latest load cycle may write the catalog or clear `loading`.
    - After close(), results of in-flight calls are dropped.
    """
    def __init__(self, backend: Backend):
        self.backend = backend
        self.catalog: List[Product] = []
        self.ui = UIState()
        self.visitors: Dict[str, Visitor] = {}
        self._cycle = 0
        self._closed = False

    # ---------------- visitors ----------------

    def visitor(self, visitor_id: Optional[str] = None) -> Visitor:
        """Look up a visitor by id, creating a fresh one for unknown/missing ids."""
        if visitor_id and visitor_id in self.visitors:
            return self.visitors[visitor_id]
        v = Visitor(visitor_id or uuid.uuid4().hex)
        self.visitors[v.id] = v
        return v

    # ---------------- derived ----------------

    def filtered(self, visitor: Visitor) -> List[Product]:
        return filter_products(self.catalog, visitor.query)

    # ---------------- actions ----------------

    async def load(self) -> None:
        """One load cycle: Loading -> Loaded | Errored."""
        if self._closed:
            return
        self._cycle += 1
        cycle = self._cycle
        self.ui = UIState(loading=True, error=self.ui.error)
        try:
            products = await self.backend.list_products()
            if self._stale(cycle):
                logger.debug("load cycle %d superseded, result dropped", cycle)
                return
            self.catalog = list(products)
            self.ui = UIState(loading=True, error=None)
            logger.info("loaded %d products", len(products))
        except BackendError as e:
            if self._stale(cycle):
                return
            logger.warning("product load failed: %s", e)
            self.ui = UIState(loading=True, error=LOAD_ERROR)
        finally:
            if not self._stale(cycle):
                self.ui = UIState(loading=False, error=self.ui.error)

    def _stale(self, cycle: int) -> bool:
        return self._closed or cycle != self._cycle

    def search(self, visitor: Visitor, query: str) -> List[Product]:
        visitor.query = query
        return self.filtered(visitor)

    def find_product(self, product_id: Union[int, str]) -> Optional[Product]:
        for p in self.catalog:
            if str(p.id) == str(product_id):
                return p
        return None

    def add_to_cart(self, visitor: Visitor, product_id: Union[int, str]) -> bool:
        p = self.find_product(product_id)
        if p is None:
            logger.debug("add_to_cart: unknown product %r ignored", product_id)
            return False
        visitor.cart = add_line(visitor.cart, p)
        return True

    def remove_from_cart(self, visitor: Visitor, index: int) -> bool:
        new_cart = remove_line(visitor.cart, index)
        if new_cart is visitor.cart:
            logger.debug("remove_from_cart: index %d out of range (%d lines)", index, len(visitor.cart))
            return False
        visitor.cart = new_cart
        return True

    async def seed_demo(self, visitor: Visitor) -> None:
        if self._closed:
            return
        try:
            await self.backend.seed()
        except BackendError as e:
            logger.warning("seeding demo data failed, refetching anyway: %s", e)
        if self._closed:
            return
        visitor.query = ""
        await self.load()

    async def checkout(self, visitor: Visitor) -> bool:
        if not visitor.cart:
            return False
        lines = visitor.cart
        order = build_order(lines)
        try:
            await self.backend.create_order(order)
        except BackendError as e:
            if self._closed:
                return False
            logger.warning("checkout of %d items failed: %s", len(lines), e)
            visitor.notice = Notice(kind="failure", message=CHECKOUT_FAILED)
            return False
        if self._closed:
            return True
        logger.info("order placed: %d items, total %.2f", len(order.items), order.total)
        visitor.cart = ()
        visitor.notice = Notice(kind="success", message=ORDER_PLACED)
        return True

    def close(self) -> None:
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def snapshot(self, visitor: Visitor) -> Dict[str, Any]:
        return {
            "loading": self.ui.loading,
            "error": self.ui.error,
            "query": visitor.query,
            "catalog": [p.model_dump() for p in self.catalog],
            "filtered": [p.model_dump() for p in self.filtered(visitor)],
            "cart": [line.model_dump() for line in visitor.cart],
            "total": round(visitor.total, 2),
            "notice": visitor.notice.model_dump() if visitor.notice else None,
        }
