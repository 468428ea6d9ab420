from stripe_mock.schemas.coupon import CouponCreate
from stripe_mock.schemas.customer import CustomerCreate
from stripe_mock.schemas.plan import PlanCreate
from stripe_mock.schemas.token import CardDetails, TokenCreate

__all__ = [
    "CardDetails",
    "CouponCreate",
    "CustomerCreate",
    "PlanCreate",
    "TokenCreate",
]
