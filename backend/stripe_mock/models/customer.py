from typing import Any

from pydantic import BaseModel, Field

from stripe_mock.models.card import Card
from stripe_mock.models.shared import StripeList, new_id, utc_timestamp
from stripe_mock.models.subscription import Subscription


class Customer(BaseModel):
    id: str = Field(default_factory=lambda: new_id("cus"))
    object: str = "customer"
    email: str | None = None
    description: str | None = None
    currency: str | None = None
    default_source: str | None = None
    sources: StripeList[Card] = Field(default_factory=StripeList[Card])
    subscriptions: StripeList[Subscription] = Field(default_factory=StripeList[Subscription])
    metadata: dict[str, Any] = Field(default_factory=dict)
    created: int = Field(default_factory=utc_timestamp)
    livemode: bool = False
