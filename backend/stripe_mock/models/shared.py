"""Shared model utilities used across all models."""

import secrets
from datetime import UTC, datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, computed_field

T = TypeVar("T")


def new_id(prefix: str) -> str:
    """Generate a new prefixed object id, e.g. ``sub_4f1c0a9b2d7e33``."""
    return f"{prefix}_{secrets.token_hex(7)}"


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(UTC)


def utc_timestamp() -> int:
    """Get current UTC time as integer Unix seconds."""
    return int(utc_now().timestamp())


class StripeList(BaseModel, Generic[T]):
    """Embedded ``{"object": "list", "data": [...]}`` collection."""

    object: str = "list"
    data: list[T] = Field(default_factory=list)
    has_more: bool = False
    url: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_count(self) -> int:
        return len(self.data)
