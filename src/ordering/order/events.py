"""Domain events for the Order aggregate.

Events are versioned, immutable facts recorded on the aggregate as it
changes. They are kept on the aggregate for observers; nothing is persisted.
"""

from protean.fields import Identifier, Text

from ordering.domain import ordering


@ordering.event(part_of="Order")
class DrinkAdded:
    """A drink was appended to an order."""

    __version__ = 1

    order_id = Identifier(required=True)
    drink_id = Identifier(required=True)
    drink_name = Text(required=True, sanitize=False)


@ordering.event(part_of="Order")
class OrderPlaced:
    """An order was placed with its first drink."""

    __version__ = 1

    order_id = Identifier(required=True)
    owner = Text(sanitize=False)
    recipient = Text(sanitize=False)
    drink_name = Text(required=True, sanitize=False)
