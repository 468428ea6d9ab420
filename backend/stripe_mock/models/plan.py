from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from stripe_mock.models.shared import new_id, utc_timestamp


class PlanInterval(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class Plan(BaseModel):
    id: str = Field(default_factory=lambda: new_id("plan"))
    object: str = "plan"
    active: bool = True
    amount: int = Field(default=0, ge=0)
    currency: str = "usd"
    interval: PlanInterval = PlanInterval.MONTH
    interval_count: int = Field(default=1, ge=1)
    trial_period_days: int | None = None
    nickname: str | None = None
    product: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    created: int = Field(default_factory=utc_timestamp)
    livemode: bool = False

    @property
    def has_trial(self) -> bool:
        return bool(self.trial_period_days)
