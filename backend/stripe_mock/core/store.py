"""Process-wide in-memory entity store.

Services never touch the dicts directly; they go through the repositories in
``stripe_mock.repositories``, which receive the store by injection.
Operations that read and then write hold ``store.lock`` for their whole
duration so a failed validation never leaves a partial write behind.
"""

from collections.abc import Generator
from threading import RLock

from stripe_mock.models.card import Token
from stripe_mock.models.coupon import Coupon
from stripe_mock.models.customer import Customer
from stripe_mock.models.plan import Plan
from stripe_mock.models.subscription import Subscription


class InMemoryStore:
    def __init__(self) -> None:
        self.lock = RLock()
        self.customers: dict[str, Customer] = {}
        self.plans: dict[str, Plan] = {}
        self.coupons: dict[str, Coupon] = {}
        self.card_tokens: dict[str, Token] = {}
        self.subscriptions: dict[str, Subscription] = {}
        # idempotency key -> id of the first subscription created with it
        self.idempotency_keys: dict[str, str] = {}

    def reset(self) -> None:
        """Drop every entity (useful for testing)."""
        with self.lock:
            self.customers.clear()
            self.plans.clear()
            self.coupons.clear()
            self.card_tokens.clear()
            self.subscriptions.clear()
            self.idempotency_keys.clear()


store = InMemoryStore()


def get_store() -> Generator[InMemoryStore, None, None]:
    yield store
