"""Tests for the OrderLedger — placing, enumerating and listing orders."""

from ordering.order.ledger import NOTHING_TO_SHOW, OrderLedger
from ordering.order.order import Order


class TestEmptyLedger:
    def test_has_no_orders(self, ledger):
        assert ledger.all() == ()
        assert len(ledger) == 0

    def test_listing_is_the_sentinel(self, ledger):
        assert ledger.listing() == NOTHING_TO_SHOW
        assert NOTHING_TO_SHOW == "Nothing to show"

    def test_separate_ledgers_do_not_share_orders(self):
        first, second = OrderLedger(), OrderLedger()
        first.create_and_add("Romeo", "Juliet", "mojito")
        assert len(second) == 0


class TestAddOrder:
    def test_add_makes_order_visible(self, ledger):
        order = Order.place("Romeo", "Juliet", "mojito")
        ledger.add(order)
        assert ledger.all() == (order,)

    def test_enumeration_follows_insertion_order(self, ledger):
        orders = [Order.place(f"owner-{i}", "Juliet", "mojito") for i in range(5)]
        for order in orders:
            ledger.add(order)
        assert list(ledger.all()) == orders

    def test_same_order_twice_is_kept_twice(self, ledger):
        order = Order.place("Romeo", "Juliet", "mojito")
        ledger.add(order)
        ledger.add(order)
        assert len(ledger) == 2

    def test_snapshot_is_not_affected_by_later_adds(self, ledger):
        ledger.create_and_add("Romeo", "Juliet", "mojito")
        snapshot = ledger.all()
        ledger.create_and_add("Juliet", "Romeo", "latte")
        assert len(snapshot) == 1
        assert len(ledger.all()) == 2

    def test_snapshot_is_immutable(self, ledger):
        ledger.create_and_add("Romeo", "Juliet", "mojito")
        assert isinstance(ledger.all(), tuple)


class TestCreateAndAdd:
    def test_returns_the_ledgered_order(self, ledger):
        order = ledger.create_and_add("Romeo", "Juliet", "mojito")
        assert ledger.all() == (order,)

    def test_sets_owner_recipient_and_one_drink(self, ledger):
        order = ledger.create_and_add("Romeo", "Juliet", "mojito")
        assert order.owner == "Romeo"
        assert order.recipient == "Juliet"
        assert [d.name for d in order.drinks] == ["mojito"]
        assert order.tax_rate == 1.0

    def test_each_call_creates_a_new_order(self, ledger):
        first = ledger.create_and_add("Romeo", "Juliet", "mojito")
        second = ledger.create_and_add("Romeo", "Juliet", "mojito")
        assert first.id != second.id
        assert len(ledger) == 2

    def test_long_names_are_ledgered_unchanged(self, ledger):
        order = ledger.create_and_add("R" * 101, "J", "y" * 101)
        assert order.owner == "R" * 101
        assert order.count_of("y" * 101) == 1


class TestListing:
    def test_single_order(self, ledger):
        ledger.create_and_add("Romeo", "Juliet", "mojito")
        assert ledger.listing() == "Order: Romeo / Juliet / { [mojito] }"

    def test_orders_are_newline_joined_in_order(self, ledger):
        ledger.create_and_add("Romeo", "Juliet", "mojito")
        ledger.create_and_add("Juliet", "Romeo", "latte")
        assert ledger.listing() == (
            "Order: Romeo / Juliet / { [mojito] }\n"
            "Order: Juliet / Romeo / { [latte] }"
        )

    def test_listing_reflects_drinks_added_later(self, ledger):
        order = ledger.create_and_add("Romeo", "Juliet", "mojito")
        order.add_drink("mojito")
        assert ledger.listing() == "Order: Romeo / Juliet / { [mojito, mojito] }"
