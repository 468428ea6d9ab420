from stripe_mock.repositories.card_token_repository import CardTokenRepository
from stripe_mock.repositories.coupon_repository import CouponRepository
from stripe_mock.repositories.customer_repository import CustomerRepository
from stripe_mock.repositories.plan_repository import PlanRepository
from stripe_mock.repositories.subscription_repository import SubscriptionRepository

__all__ = [
    "CardTokenRepository",
    "CouponRepository",
    "CustomerRepository",
    "PlanRepository",
    "SubscriptionRepository",
]
