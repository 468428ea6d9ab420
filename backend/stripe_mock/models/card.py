from typing import Any

from pydantic import BaseModel, Field

from stripe_mock.models.shared import new_id, utc_timestamp


class Card(BaseModel):
    id: str = Field(default_factory=lambda: new_id("card"))
    object: str = "card"
    brand: str = "Visa"
    funding: str = "credit"
    last4: str = "4242"
    exp_month: int = 4
    exp_year: int = 2030
    country: str = "US"
    customer: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class Token(BaseModel):
    """Single-use card token, exchanged for its card when attached."""

    id: str = Field(default_factory=lambda: new_id("tok"))
    object: str = "token"
    type: str = "card"
    card: Card
    used: bool = False
    created: int = Field(default_factory=utc_timestamp)
    livemode: bool = False
