"""Tests for CardService."""

import pytest

from stripe_mock.core.errors import ResourceNotFoundError
from stripe_mock.services.card_service import CardService
from tests.conftest import create_test_customer, create_test_token


class TestResolveSource:
    def test_returns_card_without_consuming(self, store):
        token = create_test_token(store)

        card = CardService(store).resolve_source(token.id)

        assert card is token.card
        assert token.id in store.card_tokens

    def test_unknown_token(self, store):
        with pytest.raises(ResourceNotFoundError) as exc_info:
            CardService(store).resolve_source("tok_missing")

        assert exc_info.value.param == "source"
        assert exc_info.value.http_status == 404


class TestAttachSource:
    def test_attaches_and_sets_default(self, store):
        customer = create_test_customer(store)
        token = create_test_token(store)

        card = CardService(store).attach_source(customer, token.id)

        assert card.customer == customer.id
        assert customer.default_source == card.id
        assert customer.sources.data == [card]
        assert token.id not in store.card_tokens

    def test_newest_card_becomes_default(self, store):
        customer = create_test_customer(store, with_card=True)
        token = create_test_token(store, "5555555555554444")

        card = CardService(store).attach_source(customer, token.id)

        assert customer.default_source == card.id
        assert len(customer.sources.data) == 2

    def test_used_token_rejected(self, store):
        customer = create_test_customer(store)
        token = create_test_token(store)
        service = CardService(store)
        service.attach_source(customer, token.id)

        with pytest.raises(ResourceNotFoundError):
            service.attach_source(customer, token.id)
