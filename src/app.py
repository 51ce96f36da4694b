"""Drink ordering FastAPI application.

The application is built around one OrderLedger supplied by the caller;
nothing here creates a ledger of its own. Each request runs inside the
ordering domain context.

Usage:
    python src/server.py                 # builds the ledger and serves the app
    PORT=9090 python src/server.py
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from ordering.api.routes import order_router
from ordering.domain import ordering
from ordering.order.ledger import OrderLedger
from ordering.utils.logging import add_context, clear_context
from protean.integrations.fastapi import register_exception_handlers


def create_app(ledger: OrderLedger) -> FastAPI:
    """Build the HTTP application around an existing ledger.

    The ordering domain must already be initialised.
    """
    app = FastAPI(
        title="Drink Orders API",
        description="Place drink orders and list every order placed",
    )
    app.state.ledger = ledger

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the ordering domain context for each request."""
        clear_context()
        add_context(method=request.method, path=request.url.path)
        with ordering.domain_context():
            response = await call_next(request)
        return response

    app.include_router(order_router)
    register_exception_handlers(app)

    @app.get("/health")
    async def health():
        return JSONResponse(
            content={
                "status": "ok",
                "domain": ordering.name,
                "orders": len(app.state.ledger),
            }
        )

    return app
