from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from stripe_mock.models.coupon import Discount
from stripe_mock.models.plan import Plan
from stripe_mock.models.shared import StripeList, new_id, utc_timestamp


class SubscriptionStatus(str, Enum):
    INCOMPLETE = "incomplete"
    INCOMPLETE_EXPIRED = "incomplete_expired"
    TRIALING = "trialing"
    ACTIVE = "active"
    PAST_DUE = "past_due"
    UNPAID = "unpaid"
    CANCELED = "canceled"


# Statuses an update is refused for
INACTIVE_STATUSES = frozenset({SubscriptionStatus.CANCELED, SubscriptionStatus.INCOMPLETE_EXPIRED})


class SubscriptionItem(BaseModel):
    id: str = Field(default_factory=lambda: new_id("si"))
    object: str = "subscription_item"
    plan: Plan
    quantity: int = 1
    subscription: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    created: int = Field(default_factory=utc_timestamp)


class Subscription(BaseModel):
    """Subscription schedule record.

    Defaults form the skeleton a new subscription starts from before the
    request parameters are merged in.
    """

    id: str = Field(default_factory=lambda: new_id("sub"))
    object: str = "subscription"
    customer: str | None = None
    plan: Plan | None = None
    items: StripeList[SubscriptionItem] = Field(default_factory=StripeList[SubscriptionItem])
    quantity: int | None = None
    status: SubscriptionStatus = SubscriptionStatus.ACTIVE
    created: int = Field(default_factory=utc_timestamp)
    start_date: int = Field(default_factory=utc_timestamp)
    current_period_start: int = Field(default_factory=utc_timestamp)
    current_period_end: int | None = None
    trial_start: int | None = None
    trial_end: int | None = None
    billing_cycle_anchor: int | None = None
    cancel_at_period_end: bool = False
    canceled_at: int | None = None
    ended_at: int | None = None
    discount: Discount | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    application_fee_percent: float | None = None
    tax_percent: float | None = None
    default_tax_rates: list[Any] = Field(default_factory=list)
    billing: str = "charge_automatically"
    collection_method: str = "charge_automatically"
    days_until_due: int | None = None
    prorate: bool | None = None
    livemode: bool = False
    # Stored for idempotent replay, never serialized
    idempotency_key: str | None = Field(default=None, exclude=True)

    @property
    def is_active(self) -> bool:
        return self.status not in INACTIVE_STATUSES

    def item_plans(self) -> list[Plan]:
        return [item.plan for item in self.items.data]
