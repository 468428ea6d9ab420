from stripe_mock.core.store import InMemoryStore
from stripe_mock.models.customer import Customer
from stripe_mock.models.subscription import Subscription


class SubscriptionRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    def get_all(self, skip: int = 0, limit: int = 100) -> list[Subscription]:
        return list(self.store.subscriptions.values())[skip : skip + limit]

    def get_by_id(self, subscription_id: str) -> Subscription | None:
        return self.store.subscriptions.get(subscription_id)

    def get_by_customer_id(self, customer_id: str) -> list[Subscription]:
        return [s for s in self.store.subscriptions.values() if s.customer == customer_id]

    def get_by_idempotency_key(self, idempotency_key: str) -> Subscription | None:
        subscription_id = self.store.idempotency_keys.get(idempotency_key)
        if subscription_id is None:
            return None
        return self.store.subscriptions.get(subscription_id)

    def count(self) -> int:
        return len(self.store.subscriptions)

    def create(self, subscription: Subscription, customer: Customer) -> Subscription:
        """Store a new subscription and put it at the head of the customer's list."""
        with self.store.lock:
            self.store.subscriptions[subscription.id] = subscription
            customer.subscriptions.data.insert(0, subscription)
            key = subscription.idempotency_key
            if key is not None and key not in self.store.idempotency_keys:
                self.store.idempotency_keys[key] = subscription.id
        return subscription

    def replace(self, subscription: Subscription, customer: Customer) -> Subscription:
        """Swap in a recomputed subscription under the store lock.

        The global entry is overwritten and the customer's copy is removed by id
        and re-appended, so no reader ever sees the two disagree.
        """
        with self.store.lock:
            self.store.subscriptions[subscription.id] = subscription
            customer.subscriptions.data = [
                s for s in customer.subscriptions.data if s.id != subscription.id
            ]
            customer.subscriptions.data.append(subscription)
        return subscription
