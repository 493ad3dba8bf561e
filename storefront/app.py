from __future__ import annotations
from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import Depends, FastAPI, Form, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from starlette.middleware.sessions import SessionMiddleware

from storefront import config
from storefront.components import render_page, render_product_grid
from storefront.components.page import ADD_ACTION
from storefront.services.api_client import BackendClient
from storefront.services.store import Backend, Store, Visitor

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

def create_app(backend: Optional[Backend] = None, status_url: Optional[str] = None,
               session_secret: Optional[str] = None) -> FastAPI:
    """
    Build the storefront. `backend` defaults to a BackendClient pointed at
    BACKEND_URL; tests pass a fake.
    """
    owned_client: Optional[BackendClient] = None
    if backend is None:
        if not config.BACKEND_URL:
            logger.warning(
                "BACKEND_URL is not set; backend calls go to %s (our own address). "
                "The storefront serves no /products, /seed or /orders, so set BACKEND_URL "
                "unless a proxy puts the backend on this origin.",
                config.backend_base_url(),
            )
        owned_client = BackendClient(config.backend_base_url(), timeout=config.BACKEND_TIMEOUT)
        backend = owned_client
    store = Store(backend)
    # browser-facing link: relative when the backend is same-origin
    link = status_url if status_url is not None else f"{config.public_backend_url()}/test"

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await store.load()
        try:
            yield
        finally:
            store.close()
            if owned_client is not None:
                owned_client.close()

    app = FastAPI(title="MK Clothing Storefront", lifespan=lifespan)
    app.add_middleware(SessionMiddleware, secret_key=session_secret or config.SESSION_SECRET)
    app.state.store = store

    def current_visitor(request: Request) -> Visitor:
        # the cookie only carries an id; cart/query/notice stay in memory
        v = store.visitor(request.session.get("visitor_id"))
        request.session["visitor_id"] = v.id
        return v

    def back_home() -> RedirectResponse:
        return RedirectResponse("/", status_code=303)

    @app.get("/", response_class=HTMLResponse)
    def index(visitor: Visitor = Depends(current_visitor)):
        return render_page(
            products=store.filtered(visitor), cart=visitor.cart, ui=store.ui,
            query=visitor.query, notice=visitor.pop_notice(), status_url=link,
        )

    # -------- component events --------

    @app.get("/ui/products", response_class=HTMLResponse)
    def search(q: str = Query(""), visitor: Visitor = Depends(current_visitor)):
        # raw value, no trimming
        return render_product_grid(store.search(visitor, q), ADD_ACTION)

    @app.post("/ui/cart")
    def add_to_cart(product_id: str = Form(...), visitor: Visitor = Depends(current_visitor)):
        store.add_to_cart(visitor, product_id)
        return back_home()

    @app.post("/ui/cart/{index}/remove")
    def remove_from_cart(index: int, visitor: Visitor = Depends(current_visitor)):
        store.remove_from_cart(visitor, index)
        return back_home()

    @app.post("/ui/checkout")
    async def checkout(visitor: Visitor = Depends(current_visitor)):
        await store.checkout(visitor)
        return back_home()

    @app.post("/ui/seed")
    async def seed(visitor: Visitor = Depends(current_visitor)):
        await store.seed_demo(visitor)
        return back_home()

    @app.get("/ui/state")
    def state(visitor: Visitor = Depends(current_visitor)):
        return JSONResponse(store.snapshot(visitor))

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
