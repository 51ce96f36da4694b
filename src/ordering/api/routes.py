"""FastAPI routes for the Ordering domain — placing and listing drink orders.

Responses are plain text. The ledger is the one the application was built
with, reached through ``request.app.state``.
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from ordering.order.ledger import OrderLedger

WELCOME = "Welcome to our drink ordering system"

order_router = APIRouter(tags=["orders"])


def _ledger(request: Request) -> OrderLedger:
    return request.app.state.ledger


@order_router.get("/", response_class=PlainTextResponse)
async def welcome() -> str:
    return WELCOME


@order_router.get("/orders", response_class=PlainTextResponse)
async def list_orders(request: Request) -> str:
    return _ledger(request).listing()


@order_router.get("/orders/{owner}/{recipient}/{drink}", response_class=PlainTextResponse)
async def place_order(owner: str, recipient: str, drink: str, request: Request) -> str:
    order = _ledger(request).create_and_add(owner, recipient, drink)
    return f"added {order}"
