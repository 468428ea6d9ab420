"""Card source resolution and attachment."""

import logging

from stripe_mock.core.errors import ResourceNotFoundError
from stripe_mock.core.store import InMemoryStore
from stripe_mock.models.card import Card
from stripe_mock.models.customer import Customer
from stripe_mock.repositories.card_token_repository import CardTokenRepository
from stripe_mock.repositories.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class CardService:
    """Exchanges card tokens for cards and makes them a customer's default source."""

    def __init__(self, store: InMemoryStore):
        self.store = store
        self.token_repo = CardTokenRepository(store)
        self.customer_repo = CustomerRepository(store)

    def resolve_source(self, token_id: str) -> Card:
        """Look up the card behind a token without consuming it.

        Raises:
            ResourceNotFoundError: If the token does not exist or was already used.
        """
        token = self.token_repo.get_by_id(str(token_id))
        if token is None:
            raise ResourceNotFoundError(f"No such token: '{token_id}'", param="source")
        return token.card

    def attach_source(self, customer: Customer, token_id: str) -> Card:
        """Consume the token, add its card to the customer and make it the default source."""
        with self.store.lock:
            card = self.resolve_source(token_id)
            self.token_repo.consume(str(token_id))
            self.customer_repo.add_card(customer, card)
            self.customer_repo.set_default_source(customer, card.id)

        logger.info("Attached card %s to customer %s as default source", card.id, customer.id)
        return card
