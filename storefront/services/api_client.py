from __future__ import annotations
from typing import List, Optional
import asyncio
import logging

import requests
from pydantic import ValidationError

from storefront.schemas import OrderRequest, Product

logger = logging.getLogger(__name__)

class BackendError(RuntimeError):
    """Any backend call that did not end in a 2xx with a usable body."""
    def __init__(self, method: str, path: str, status: Optional[int] = None, reason: str = ""):
        self.method = method
        self.path = path
        self.status = status
        self.reason = reason
        where = f"{method} {path}"
        what = f"HTTP {status}" if status is not None else (reason or "request failed")
        super().__init__(f"{where}: {what}")

class BackendClient:
    """
    Thin client for the store backend.

    Calls go through a blocking requests.Session, pushed onto a worker thread
    with asyncio.to_thread so the event loop keeps serving pages meanwhile.
    """
    def __init__(self, base_url: str, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _request(self, method: str, path: str, **kw) -> requests.Response:
        try:
            resp = self.session.request(method, self.url(path), timeout=self.timeout, **kw)
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise BackendError(method, path, reason=str(e)) from e
        if not resp.ok:
            logger.warning("%s %s -> HTTP %s", method, path, resp.status_code)
            raise BackendError(method, path, status=resp.status_code)
        return resp

    def _list_products(self) -> List[Product]:
        resp = self._request("GET", "/products")
        try:
            data = resp.json()
            if not isinstance(data, list):
                raise ValueError("expected a JSON array")
            return [Product.model_validate(it) for it in data]
        except (ValueError, ValidationError) as e:
            logger.warning("GET /products returned an unusable body: %s", e)
            raise BackendError("GET", "/products", status=resp.status_code, reason=str(e)) from e

    async def list_products(self) -> List[Product]:
        return await asyncio.to_thread(self._list_products)

    async def seed(self) -> None:
        # response body is not interesting, only whether it succeeded
        await asyncio.to_thread(self._request, "POST", "/seed")

    async def create_order(self, order: OrderRequest) -> None:
        await asyncio.to_thread(self._request, "POST", "/orders", json=order.model_dump(mode="json"))

    def status_url(self) -> str:
        return self.url("/test")

    def close(self) -> None:
        self.session.close()
