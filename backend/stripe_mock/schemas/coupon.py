from typing import Any

from pydantic import BaseModel, Field, model_validator

from stripe_mock.models.coupon import CouponDuration


class CouponCreate(BaseModel):
    id: str | None = Field(default=None, min_length=1, max_length=255)
    duration: CouponDuration = CouponDuration.ONCE
    duration_in_months: int | None = Field(default=None, ge=1)
    percent_off: float | None = Field(default=None, gt=0, le=100)
    amount_off: int | None = Field(default=None, gt=0)
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    max_redemptions: int | None = Field(default=None, ge=1)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_discount_terms(self) -> "CouponCreate":
        if (self.percent_off is None) == (self.amount_off is None):
            raise ValueError("Exactly one of percent_off or amount_off is required")
        if self.amount_off is not None and not self.currency:
            raise ValueError("currency is required with amount_off")
        if self.duration == CouponDuration.REPEATING and not self.duration_in_months:
            raise ValueError("duration_in_months is required for repeating coupons")
        return self
