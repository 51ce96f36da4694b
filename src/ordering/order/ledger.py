"""Order ledger — every order placed while the process runs.

The ledger is created once at startup and handed to whatever builds the
request handlers; it is never reconstructed and holds orders in memory only.
A single lock guards both appends and snapshots, so concurrent handlers never
lose an entry and a reader never sees an order before it is fully built.
"""

import threading

import structlog

from ordering.order.order import Order

logger = structlog.get_logger(__name__)

NOTHING_TO_SHOW = "Nothing to show"


class OrderLedger:
    """Append-only, insertion-ordered collection of orders."""

    def __init__(self) -> None:
        self._orders: list[Order] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)

    def add(self, order: Order) -> None:
        with self._lock:
            self._orders.append(order)
            position = len(self._orders)

        logger.info(
            "Order ledgered",
            order_id=str(order.id),
            owner=order.owner,
            recipient=order.recipient,
            position=position,
        )

    def all(self) -> tuple[Order, ...]:
        """Snapshot of the orders ledgered so far, oldest first."""
        with self._lock:
            return tuple(self._orders)

    def listing(self) -> str:
        orders = self.all()
        if not orders:
            return NOTHING_TO_SHOW
        return "\n".join(str(order) for order in orders)

    def create_and_add(self, owner: str, recipient: str, drink_name: str) -> Order:
        """Place a one-drink order and ledger it.

        The order is fully built before it is appended.
        """
        order = Order.place(owner=owner, recipient=recipient, drink_name=drink_name)
        self.add(order)
        return order
