"""Tests for settings, logging setup and the error types."""

import logging

import pytest

from stripe_mock.core.config import Settings
from stripe_mock.core.errors import (
    CardRequiredError,
    ErrorKind,
    InvalidRequestError,
    ResourceNotFoundError,
    assert_existence,
)
from stripe_mock.core.logger import setup_logging
from stripe_mock.core.store import InMemoryStore, get_store
from stripe_mock.models.plan import Plan


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.APP_NAME == "stripe-mock"
        assert settings.LOG_LEVEL == "INFO"
        assert settings.TRIAL_END_MAX_YEARS == 5

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("TRIAL_END_MAX_YEARS", "2")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.TRIAL_END_MAX_YEARS == 2
        assert settings.LOG_LEVEL == "DEBUG"


class TestSetupLogging:
    def test_does_not_stack_handlers(self):
        logger = setup_logging("debug")
        handlers = list(logger.handlers)

        setup_logging("info")

        assert logger.name == "stripe_mock"
        assert logger.handlers == handlers
        assert logger.level == logging.INFO


class TestErrors:
    def test_envelope(self):
        error = InvalidRequestError("Bad thing", param="plan", code="parameter_invalid")

        assert error.to_dict() == {
            "error": {
                "type": "invalid_request_error",
                "code": "parameter_invalid",
                "message": "Bad thing",
                "param": "plan",
            }
        }
        assert str(error) == "Bad thing"

    def test_defaults_per_kind(self):
        not_found = ResourceNotFoundError("gone")
        card = CardRequiredError()

        assert not_found.kind == ErrorKind.NOT_FOUND
        assert not_found.http_status == 404
        assert not_found.code == "resource_missing"
        assert card.kind == ErrorKind.CARD_REQUIRED
        assert card.http_status == 400
        assert card.message == "This customer has no attached payment source"

    def test_status_override(self):
        assert InvalidRequestError("x", http_status=409).http_status == 409

    def test_assert_existence(self):
        plan = Plan(id="plan_a")
        assert assert_existence("plan", "plan_a", plan) is plan

        with pytest.raises(ResourceNotFoundError) as exc_info:
            assert_existence("plan", "plan_b", None)
        assert exc_info.value.message == "No such plan: 'plan_b'"
        assert exc_info.value.param == "plan"


class TestStore:
    def test_reset(self):
        store = InMemoryStore()
        store.plans["plan_a"] = Plan(id="plan_a")
        store.idempotency_keys["k"] = "sub_1"

        store.reset()

        assert store.plans == {}
        assert store.idempotency_keys == {}

    def test_get_store_yields_shared_store(self, store):
        assert next(get_store()) is store
