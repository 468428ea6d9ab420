from typing import Any

from pydantic import BaseModel, EmailStr, Field


class CustomerCreate(BaseModel):
    id: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    description: str | None = None
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    source: str | None = Field(default=None, description="Card token to attach as default source")
    metadata: dict[str, Any] = Field(default_factory=dict)
