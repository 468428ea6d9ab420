"""Shared test fixtures for all test modules."""

import pytest
from fastapi.testclient import TestClient

from stripe_mock.core.store import InMemoryStore
from stripe_mock.core.store import store as app_store
from stripe_mock.main import app
from stripe_mock.models.card import Token
from stripe_mock.models.coupon import Coupon, CouponDuration
from stripe_mock.models.customer import Customer
from stripe_mock.models.plan import Plan, PlanInterval
from stripe_mock.repositories.card_token_repository import CardTokenRepository
from stripe_mock.repositories.customer_repository import CustomerRepository
from stripe_mock.schemas.customer import CustomerCreate
from stripe_mock.schemas.token import TokenCreate
from stripe_mock.services.card_service import CardService


@pytest.fixture(autouse=True)
def reset_store():
    """Start every test from an empty store and leave nothing behind."""
    app_store.reset()
    yield
    app_store.reset()


@pytest.fixture
def store() -> InMemoryStore:
    """Return the store the app is wired to."""
    return app_store


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


def create_test_customer(
    store: InMemoryStore,
    customer_id: str = "cus_1",
    currency: str | None = "usd",
    with_card: bool = False,
) -> Customer:
    """Helper to create a test customer, optionally with a default card."""
    customer = CustomerRepository(store).create(
        CustomerCreate(id=customer_id, currency=currency, email="test@example.com")
    )
    if with_card:
        token = create_test_token(store)
        CardService(store).attach_source(customer, token.id)
    return customer


def create_test_plan(
    store: InMemoryStore,
    plan_id: str = "plan_paid",
    amount: int = 1000,
    currency: str = "usd",
    interval: PlanInterval = PlanInterval.MONTH,
    trial_period_days: int | None = None,
) -> Plan:
    """Helper to create a test plan."""
    plan = Plan(
        id=plan_id,
        amount=amount,
        currency=currency,
        interval=interval,
        trial_period_days=trial_period_days,
    )
    store.plans[plan.id] = plan
    return plan


def create_test_coupon(
    store: InMemoryStore,
    coupon_id: str = "TENOFF",
    duration: CouponDuration = CouponDuration.ONCE,
    duration_in_months: int | None = None,
) -> Coupon:
    """Helper to create a 10% off test coupon."""
    coupon = Coupon(
        id=coupon_id,
        duration=duration,
        duration_in_months=duration_in_months,
        percent_off=10,
    )
    store.coupons[coupon.id] = coupon
    return coupon


def create_test_token(store: InMemoryStore, number: str = "4242424242424242") -> Token:
    """Helper to create a single-use card token."""
    return CardTokenRepository(store).create(TokenCreate(card={"number": number}))
