"""Ordering load test scenarios.

A sequential journey that places a small round of orders and checks they
appear in the listing, and a flood user that hammers the ledger with
concurrent placements to exercise its lock.
"""

from locust import HttpUser, SequentialTaskSet, between, constant_pacing, task

from loadtests.data_generators import drink_name, order_path, party_name
from loadtests.helpers.response import extract_error_detail


class RoundOfDrinksJourney(SequentialTaskSet):
    """Place an order -> Order back -> List all orders.

    Models two guests buying each other a drink, then someone glancing
    at the order board.
    """

    def on_start(self):
        self.owner = party_name()
        self.recipient = party_name()

    @task
    def place_order(self):
        path = order_path(self.owner, self.recipient, drink_name())
        with self.client.get(path, catch_response=True, name="GET /orders/{owner}/{recipient}/{drink}") as resp:
            if resp.status_code == 200 and resp.text.startswith("added Order:"):
                resp.success()
            else:
                resp.failure(f"Place order failed: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def order_back(self):
        path = order_path(self.recipient, self.owner, drink_name())
        with self.client.get(path, catch_response=True, name="GET /orders/{owner}/{recipient}/{drink}") as resp:
            if resp.status_code != 200:
                resp.failure(f"Order back failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def list_orders(self):
        with self.client.get("/orders", catch_response=True, name="GET /orders") as resp:
            if resp.status_code != 200:
                resp.failure(f"List orders failed: {resp.status_code} — {extract_error_detail(resp)}")
            elif f"Order: {self.owner} / {self.recipient}" not in resp.text:
                resp.failure("Placed order missing from listing")
        self.interrupt()


class OrderingUser(HttpUser):
    """Realistic ordering traffic: mostly placing, some listing."""

    wait_time = between(0.5, 3.0)
    tasks = {RoundOfDrinksJourney: 1}


class LedgerFloodUser(HttpUser):
    """Stress test: concurrent placements against the shared ledger.

    Every task appends one order; listing reads run alongside so snapshot
    reads contend with appends.
    """

    wait_time = constant_pacing(0.1)  # ~10 requests/sec per user

    @task(9)
    def place_order(self):
        self.client.get(order_path(), name="[STRESS] GET /orders/{owner}/{recipient}/{drink}")

    @task(1)
    def list_orders(self):
        self.client.get("/orders", name="[STRESS] GET /orders")
