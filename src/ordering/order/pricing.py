"""Drink catalogue port and pricing helpers.

The Catalogue is owned outside the ordering core: orders ask it for unit
prices at computation time and never store it. Whatever an implementation
raises for an unknown drink reaches the caller untouched.

PriceList is a read-only in-memory adapter for development and tests.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from decimal import ROUND_HALF_EVEN, Decimal

import structlog
from protean.exceptions import ObjectNotFoundError

logger = structlog.get_logger(__name__)

CENT = Decimal("0.01")


def as_amount(value) -> Decimal:
    """Convert a price or rate to Decimal through its decimal text form."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_to_cents(amount: Decimal) -> Decimal:
    """Quantise to two fractional digits, ties going to the even cent."""
    return amount.quantize(CENT, rounding=ROUND_HALF_EVEN)


class Catalogue(ABC):
    """Abstract drink catalogue."""

    @abstractmethod
    def price(self, drink_name: str) -> Decimal:
        """Return the unit price of the named drink."""
        ...


class PriceList(Catalogue):
    """Fixed, read-only catalogue backed by a name -> price mapping."""

    def __init__(self, prices: Mapping[str, object]) -> None:
        self._prices: dict[str, Decimal] = {name: as_amount(price) for name, price in prices.items()}

    def __contains__(self, drink_name: str) -> bool:
        return drink_name in self._prices

    def __len__(self) -> int:
        return len(self._prices)

    def price(self, drink_name: str) -> Decimal:
        try:
            return self._prices[drink_name]
        except KeyError:
            logger.warning("Drink missing from price list", drink_name=drink_name)
            raise ObjectNotFoundError(f"No price listed for drink `{drink_name}`") from None
