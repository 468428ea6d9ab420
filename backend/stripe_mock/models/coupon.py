from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from stripe_mock.models.shared import new_id, utc_timestamp

# Length of a "month" when computing a repeating discount's end
SECONDS_PER_MONTH = 2_592_000


class CouponDuration(str, Enum):
    ONCE = "once"
    REPEATING = "repeating"
    FOREVER = "forever"


class Coupon(BaseModel):
    id: str = Field(default_factory=lambda: new_id("coupon"))
    object: str = "coupon"
    duration: CouponDuration = CouponDuration.ONCE
    duration_in_months: int | None = None
    percent_off: float | None = None
    amount_off: int | None = None
    currency: str | None = None
    max_redemptions: int | None = None
    times_redeemed: int = 0
    valid: bool = True
    metadata: dict[str, Any] = Field(default_factory=dict)
    created: int = Field(default_factory=utc_timestamp)
    livemode: bool = False


class Discount(BaseModel):
    """A coupon applied to a subscription."""

    object: str = "discount"
    coupon: Coupon
    customer: str | None = None
    subscription: str | None = None
    start: int = Field(default_factory=utc_timestamp)
    end: int | None = None

    @classmethod
    def for_subscription(
        cls, coupon: Coupon, subscription_id: str, customer_id: str | None, start: int
    ) -> "Discount":
        end = None
        if coupon.duration == CouponDuration.REPEATING and coupon.duration_in_months:
            end = start + coupon.duration_in_months * SECONDS_PER_MONTH
        return cls(
            coupon=coupon,
            customer=customer_id,
            subscription=subscription_id,
            start=start,
            end=end,
        )
