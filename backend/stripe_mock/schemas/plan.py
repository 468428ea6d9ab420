from typing import Any

from pydantic import BaseModel, Field

from stripe_mock.models.plan import PlanInterval


class PlanCreate(BaseModel):
    id: str | None = Field(default=None, min_length=1, max_length=255)
    amount: int = Field(..., ge=0)
    currency: str = Field(default="usd", min_length=3, max_length=3)
    interval: PlanInterval = PlanInterval.MONTH
    interval_count: int = Field(default=1, ge=1)
    trial_period_days: int | None = Field(default=None, ge=0)
    nickname: str | None = None
    product: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
