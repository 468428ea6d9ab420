"""Validation rules applied to subscription schedule requests.

Each check raises a :class:`StripeMockError` subclass on failure and returns
``None`` otherwise. The service runs them in a fixed order: currency, unknown
parameters, trial end, coupon, card presence.
"""

from collections.abc import Mapping
from typing import Any

from stripe_mock.core.config import settings
from stripe_mock.core.errors import (
    CardRequiredError,
    InvalidRequestError,
    ResourceNotFoundError,
)
from stripe_mock.models.card import Card
from stripe_mock.models.coupon import Coupon
from stripe_mock.models.customer import Customer
from stripe_mock.models.plan import Plan
from stripe_mock.models.shared import utc_timestamp
from stripe_mock.models.subscription import Subscription
from stripe_mock.repositories.coupon_repository import CouponRepository

ALLOWED_CREATE_PARAMS = frozenset(
    {
        "customer",
        "application_fee_percent",
        "coupon",
        "items",
        "metadata",
        "plan",
        "quantity",
        "source",
        "tax_percent",
        "trial_end",
        "trial_period_days",
        "current_period_start",
        "created",
        "prorate",
        "billing_cycle_anchor",
        "billing",
        "days_until_due",
        "idempotency_key",
        "enable_incomplete_payments",
        "cancel_at_period_end",
        "default_tax_rates",
        "collection_method",
        "id",
    }
)

SECONDS_PER_YEAR = 31_557_600
SEND_INVOICE = "send_invoice"


def verify_currency(customer: Customer, plans: list[Plan]) -> None:
    """Every plan must be billed in the customer's currency.

    A customer without a currency yet takes the first plan's, so the
    remaining plans must agree with that one.
    """
    if not plans:
        return
    expected = customer.currency or plans[0].currency
    for plan in plans:
        if plan.currency.lower() != expected.lower():
            raise InvalidRequestError(
                f"Customer's currency of {expected} does not match plan's currency of "
                f"{plan.currency}",
                param="currency",
            )


def verify_known_params(params: Mapping[str, Any]) -> None:
    unknown = [key for key in params if key not in ALLOWED_CREATE_PARAMS]
    if unknown:
        raise InvalidRequestError(
            f"Received unknown parameter: {', '.join(unknown)}",
            param=unknown[0],
            code="parameter_unknown",
        )


def verify_plans_present(plans: list[Plan]) -> None:
    if not plans:
        raise InvalidRequestError(
            "Missing required param: items.", param="items", code="parameter_missing"
        )


def verify_trial_end(trial_end: Any, now: int | None = None) -> None:
    """``trial_end`` must be ``"now"`` or a future Unix timestamp within the allowed horizon."""
    if trial_end == "now":
        return
    now = now if now is not None else utc_timestamp()
    if isinstance(trial_end, bool) or not isinstance(trial_end, int):
        raise InvalidRequestError("Invalid timestamp: must be an integer", param="trial_end")
    if trial_end < now:
        raise InvalidRequestError(
            "Invalid timestamp: must be an integer Unix timestamp in the future",
            param="trial_end",
        )
    max_years = settings.TRIAL_END_MAX_YEARS
    if trial_end > now + SECONDS_PER_YEAR * max_years:
        raise InvalidRequestError(
            f"Invalid timestamp: can be no more than {max_years} years in the future",
            param="trial_end",
        )


def verify_coupon(coupon_id: str, coupon_repo: CouponRepository) -> Coupon:
    """Look up a coupon, reporting a miss as a 400 rather than a 404.

    The remote API answers an unknown coupon on a subscription with a bad
    request, not with the resource-missing status used for other lookups.
    """
    coupon = coupon_repo.get_by_id(coupon_id)
    if coupon is None:
        raise InvalidRequestError(f"No such coupon: '{coupon_id}'", param="coupon")
    return coupon


def verify_card_present(
    customer: Customer,
    plan: Plan | None,
    subscription: Subscription,
    params: Mapping[str, Any],
    pending_source: Card | None = None,
) -> None:
    """Require a payment source when the subscription will be charged right away."""
    if customer.default_source or pending_source is not None:
        return

    trial_end = params.get("trial_end")
    skip_trial = trial_end == "now"
    if trial_end is not None and not skip_trial:
        return
    if plan is not None and (plan.amount == 0 or (plan.has_trial and not skip_trial)):
        return
    if subscription.trial_end is not None:
        return
    if SEND_INVOICE in (params.get("billing"), params.get("collection_method")):
        return

    chargeable = [
        p for p in subscription.item_plans() if p.amount > 0 and (skip_trial or not p.has_trial)
    ]
    if not chargeable:
        return

    raise CardRequiredError()


def verify_active_status(subscription: Subscription) -> None:
    if not subscription.is_active:
        raise ResourceNotFoundError(
            f"No such subscription: '{subscription.id}'", param="subscription"
        )
