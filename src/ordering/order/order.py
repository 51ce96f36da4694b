"""Order aggregate — drinks requested by one party for another.

An Order collects Drink line items in the order they were added, together
with who placed it, who receives it, and the tax multiplier applied to its
total. Prices are never stored on the order: totals are computed on demand
against a Catalogue handed in by the caller.

Monetary arithmetic is done in Decimal. The tax rate multiplies the
unrounded subtotal and only the final figure is rounded, half to even, to
two fractional digits.
"""

from decimal import Decimal

from protean.fields import Decimal as Amount
from protean.fields import HasMany, Text

from ordering.domain import ordering
from ordering.order.events import DrinkAdded, OrderPlaced
from ordering.order.pricing import Catalogue, as_amount, round_to_cents

NO_TAX = Decimal("1.0")


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class Drink:
    """A single named drink within an order.

    Drinks are only ever appended to an order; nothing renames or removes
    them afterwards. Names are kept exactly as given and are case-sensitive.
    """

    name = Text(required=True, sanitize=False)

    def __str__(self):
        return self.name


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    owner = Text(sanitize=False)
    recipient = Text(sanitize=False)
    tax_rate = Amount(default=NO_TAX)
    drinks = HasMany(Drink)

    # -------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, owner=None, recipient=None):
        return cls(owner=owner, recipient=recipient, tax_rate=NO_TAX)

    @classmethod
    def place(cls, owner, recipient, drink_name):
        """Create an order for `recipient` on behalf of `owner` with one drink."""
        order = cls.create(owner=owner, recipient=recipient)
        order.add_drink(drink_name)

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                owner=owner,
                recipient=recipient,
                drink_name=drink_name,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def set_owner(self, who):
        self.owner = who

    def set_recipient(self, who):
        self.recipient = who

    def set_tax_rate(self, rate):
        self.tax_rate = as_amount(rate)

    def add_drink(self, name):
        """Append a drink to the end of the order and return it."""
        drink = Drink(name=name)
        self.add_drinks(drink)

        self.raise_(
            DrinkAdded(
                order_id=str(self.id),
                drink_id=str(drink.id),
                drink_name=name,
            )
        )
        return drink

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def count_of(self, name):
        return sum(1 for drink in self.drinks if drink.name == name)

    def compute_price(self, catalogue: Catalogue) -> Decimal:
        """Sum the catalogue price of every drink, repeats included.

        Errors raised by the catalogue (e.g. for an unknown drink) propagate.
        """
        return sum(
            (as_amount(catalogue.price(drink.name)) for drink in self.drinks),
            Decimal("0"),
        )

    def compute_price_with_taxes(self, catalogue: Catalogue) -> Decimal:
        return round_to_cents(self.compute_price(catalogue) * as_amount(self.tax_rate))

    def __str__(self):
        drinks = ", ".join(str(drink) for drink in self.drinks)
        return f"Order: {self.owner} / {self.recipient} / {{ [{drinks}] }}"
