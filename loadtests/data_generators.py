"""Faker-based data generators for Locust load test scenarios.

Generated names are used as URL path segments, so they are kept to
characters that need no escaping beyond spaces.
"""

import random

from faker import Faker

fake = Faker()

DRINKS = [
    "americano",
    "cappuccino",
    "espresso",
    "latte",
    "mocha",
    "mojito",
    "margarita",
    "spritz",
    "lemonade",
]


def party_name() -> str:
    """A first name for an order owner or recipient."""
    return fake.first_name()


def drink_name() -> str:
    return random.choice(DRINKS)


def order_path(owner: str | None = None, recipient: str | None = None, drink: str | None = None) -> str:
    """Build the place-order path for the given (or random) parties and drink."""
    return f"/orders/{owner or party_name()}/{recipient or party_name()}/{drink or drink_name()}"
