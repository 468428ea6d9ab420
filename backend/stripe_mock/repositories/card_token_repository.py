"""Repository for single-use card tokens."""

from stripe_mock.core.store import InMemoryStore
from stripe_mock.models.card import Card, Token
from stripe_mock.schemas.token import TokenCreate

CARD_BRANDS = {
    "3": "American Express",
    "4": "Visa",
    "5": "MasterCard",
    "6": "Discover",
}


class CardTokenRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    def get_by_id(self, token_id: str) -> Token | None:
        return self.store.card_tokens.get(token_id)

    def create(self, data: TokenCreate) -> Token:
        details = data.card
        card = Card(
            brand=CARD_BRANDS.get(details.number[0], "Unknown"),
            last4=details.number[-4:],
            exp_month=details.exp_month,
            exp_year=details.exp_year,
        )
        token = Token(card=card)
        self.store.card_tokens[token.id] = token
        return token

    def consume(self, token_id: str) -> Card | None:
        """Remove the token and hand back its card."""
        token = self.store.card_tokens.pop(token_id, None)
        if token is None:
            return None
        token.used = True
        return token.card
