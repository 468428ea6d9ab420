from stripe_mock.models.card import Card, Token
from stripe_mock.models.coupon import Coupon, CouponDuration, Discount
from stripe_mock.models.customer import Customer
from stripe_mock.models.plan import Plan, PlanInterval
from stripe_mock.models.shared import StripeList, new_id, utc_now, utc_timestamp
from stripe_mock.models.subscription import (
    INACTIVE_STATUSES,
    Subscription,
    SubscriptionItem,
    SubscriptionStatus,
)

__all__ = [
    "Card",
    "Coupon",
    "CouponDuration",
    "Customer",
    "Discount",
    "INACTIVE_STATUSES",
    "Plan",
    "PlanInterval",
    "StripeList",
    "Subscription",
    "SubscriptionItem",
    "SubscriptionStatus",
    "Token",
    "new_id",
    "utc_now",
    "utc_timestamp",
]
