from typing import Any

from fastapi import APIRouter, Body, Depends, Request

from stripe_mock.core.store import InMemoryStore, get_store
from stripe_mock.models.subscription import Subscription
from stripe_mock.services.subscription_schedule_service import SubscriptionScheduleService

router = APIRouter()

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"description": "Invalid request, currency mismatch or missing payment source"},
    404: {"description": "Referenced customer, plan, token or subscription not found"},
}


@router.post(
    "",
    response_model=Subscription,
    summary="Create subscription schedule",
    responses=ERROR_RESPONSES,
)
async def create_subscription_schedule(
    request: Request,
    params: dict[str, Any] = Body(default={}),
    store: InMemoryStore = Depends(get_store),
) -> Subscription:
    """Create a subscription schedule. Replays the original on a repeated ``Idempotency-Key``."""
    service = SubscriptionScheduleService(store)
    return service.create(params, request.headers)


@router.get(
    "/{subscription_id}",
    response_model=Subscription,
    summary="Retrieve subscription schedule",
    responses={404: {"description": "Subscription not found"}},
)
async def retrieve_subscription_schedule(
    subscription_id: str,
    store: InMemoryStore = Depends(get_store),
) -> Subscription:
    """Get a subscription schedule by ID."""
    return SubscriptionScheduleService(store).retrieve(subscription_id)


@router.post(
    "/{subscription_id}",
    response_model=Subscription,
    summary="Update subscription schedule",
    responses=ERROR_RESPONSES,
)
async def update_subscription_schedule(
    subscription_id: str,
    request: Request,
    params: dict[str, Any] = Body(default={}),
    store: InMemoryStore = Depends(get_store),
) -> Subscription:
    """Update a subscription schedule."""
    service = SubscriptionScheduleService(store)
    return service.update(subscription_id, params, request.headers)
