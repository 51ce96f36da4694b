"""Shared BDD fixtures and step definitions for the Ordering domain."""

from decimal import Decimal

import pytest
from ordering.order.ledger import OrderLedger
from ordering.order.order import Order
from pytest_bdd import given, parsers


@pytest.fixture()
def error():
    """Container for captured errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps: Order
# ---------------------------------------------------------------------------
@given(parsers.cfparse("{who} who wants to create an Order"), target_fixture="order")
def creating_an_order(who):
    order = Order.create()
    order.set_owner(who)
    return order


@given(parsers.cfparse('the price of a "{drink}" being {price} dollars'))
def price_of_drink(prices, drink, price):
    prices[drink] = Decimal(price)


@given(parsers.cfparse("taxes in {place} being {rate}%"))
def taxes_in_place(order, place, rate):
    order.set_tax_rate(1 + Decimal(rate) / 100)


# ---------------------------------------------------------------------------
# Given steps: Ledger
# ---------------------------------------------------------------------------
@given("an empty order ledger", target_fixture="ledger")
def empty_ledger():
    return OrderLedger()
