from stripe_mock.core.store import InMemoryStore
from stripe_mock.models.card import Card
from stripe_mock.models.customer import Customer
from stripe_mock.schemas.customer import CustomerCreate


class CustomerRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    def get_all(self, skip: int = 0, limit: int = 100) -> list[Customer]:
        return list(self.store.customers.values())[skip : skip + limit]

    def get_by_id(self, customer_id: str) -> Customer | None:
        return self.store.customers.get(customer_id)

    def id_exists(self, customer_id: str) -> bool:
        return customer_id in self.store.customers

    def create(self, data: CustomerCreate) -> Customer:
        fields = data.model_dump(exclude={"source"}, exclude_none=True)
        if data.currency:
            fields["currency"] = data.currency.lower()
        customer = Customer(**fields)
        self.store.customers[customer.id] = customer
        return customer

    def add_card(self, customer: Customer, card: Card) -> Card:
        """Attach a card to the customer's sources."""
        card.customer = customer.id
        customer.sources.data.append(card)
        return card

    def set_default_source(self, customer: Customer, card_id: str) -> Customer:
        customer.default_source = card_id
        return customer

    def adopt_currency(self, customer: Customer, currency: str) -> Customer:
        """Set the customer's currency if it has none yet; never overwrite it."""
        if customer.currency is None:
            customer.currency = currency.lower()
        return customer
