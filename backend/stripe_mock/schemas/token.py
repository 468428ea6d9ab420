from pydantic import BaseModel, Field


class CardDetails(BaseModel):
    """Raw card details exchanged for a single-use token."""

    number: str = Field(default="4242424242424242", min_length=12, max_length=19, pattern=r"^\d+$")
    exp_month: int = Field(default=4, ge=1, le=12)
    exp_year: int = Field(default=2030, ge=2000)
    cvc: str | None = Field(default=None, min_length=3, max_length=4)


class TokenCreate(BaseModel):
    card: CardDetails = Field(default_factory=CardDetails)
