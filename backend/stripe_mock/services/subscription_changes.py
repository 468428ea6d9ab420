"""Merge request parameters into a subscription record.

Everything here is a pure function of its inputs: each call returns a new
:class:`Subscription` and leaves the one passed in untouched. No validation
happens here; callers run the checks in ``subscription_validation`` before
and after.
"""

import calendar as cal
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from stripe_mock.models.coupon import Coupon, Discount
from stripe_mock.models.customer import Customer
from stripe_mock.models.plan import Plan, PlanInterval
from stripe_mock.models.shared import StripeList, new_id, utc_timestamp
from stripe_mock.models.subscription import Subscription, SubscriptionItem, SubscriptionStatus
from stripe_mock.services.plan_resolver import requested_items

SECONDS_PER_DAY = 86_400

# Copied onto the subscription verbatim when present in the request
PASSTHROUGH_PARAMS = (
    "application_fee_percent",
    "quantity",
    "metadata",
    "tax_percent",
    "billing",
    "days_until_due",
    "default_tax_rates",
    "collection_method",
    "prorate",
    "billing_cycle_anchor",
)


def parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


def _add_months(dt: datetime, months: int) -> datetime:
    """Add months to a datetime, clamping to last day of month."""
    month = dt.month - 1 + months
    year = dt.year + month // 12
    month = month % 12 + 1
    max_day = cal.monthrange(year, month)[1]
    day = min(dt.day, max_day)
    return dt.replace(year=year, month=month, day=day)


def get_ending_time(start: int, plan: Plan | None, intervals: int = 1) -> int:
    """End of the billing period that starts at ``start`` for ``plan``."""
    if plan is None:
        return start

    count = plan.interval_count * intervals
    if plan.interval == PlanInterval.DAY:
        return start + count * SECONDS_PER_DAY
    if plan.interval == PlanInterval.WEEK:
        return start + count * 7 * SECONDS_PER_DAY

    months = count if plan.interval == PlanInterval.MONTH else count * 12
    start_dt = datetime.fromtimestamp(start, UTC)
    return int(_add_months(start_dt, months).timestamp())


def _resolve_items(
    subscription: Subscription,
    plans: list[Plan],
    params: Mapping[str, Any],
    now: int,
) -> list[SubscriptionItem]:
    requested = list(requested_items(params.get("items")))
    prior: dict[str, list[SubscriptionItem]] = {}
    for item in subscription.items.data:
        prior.setdefault(item.plan.id, []).append(item)

    items = []
    for plan in plans:
        match = next((r for r in requested if str(r.get("plan")) == plan.id), None)
        if match is not None:
            requested.remove(match)
        previous = prior[plan.id].pop(0) if prior.get(plan.id) else None

        if match is not None and match.get("quantity") is not None:
            quantity = match["quantity"]
        elif len(plans) == 1 and params.get("quantity") is not None:
            quantity = params["quantity"]
        elif previous is not None:
            quantity = previous.quantity
        else:
            quantity = 1

        if match is not None and match.get("id"):
            item_id = str(match["id"])
        elif previous is not None:
            item_id = previous.id
        else:
            item_id = new_id("si")

        items.append(
            SubscriptionItem(
                id=item_id,
                plan=plan,
                quantity=quantity,
                subscription=subscription.id,
                metadata=previous.metadata if previous is not None else {},
                created=previous.created if previous is not None else now,
            )
        )
    return items


def resolve_subscription_changes(
    subscription: Subscription,
    plans: list[Plan],
    customer: Customer,
    params: Mapping[str, Any],
    now: int | None = None,
) -> Subscription:
    """Return ``subscription`` with the request's plans and parameters applied.

    Fields the request does not mention keep their prior values. A plan's
    ``trial_period_days`` only starts a trial when that plan is newly added,
    so re-saving an active subscription does not put it back on trial.

    Raises:
        pydantic.ValidationError: If a parameter value has the wrong type.
    """
    now = now if now is not None else utc_timestamp()
    first_plan = plans[0] if plans else None
    start = params.get("current_period_start") or subscription.current_period_start

    updates: dict[str, Any] = {
        "customer": customer.id,
        "plan": first_plan if len(plans) == 1 else None,
        "current_period_start": start,
        "created": params.get("created") or subscription.created,
    }
    for key in PASSTHROUGH_PARAMS:
        if key in params:
            updates[key] = params[key]

    trial_end = params.get("trial_end")
    trial_days = params.get("trial_period_days")
    prior_plans = subscription.item_plans()
    prior_plan_ids = {p.id for p in prior_plans}
    if trial_days is None and first_plan is not None and first_plan.id not in prior_plan_ids:
        trial_days = first_plan.trial_period_days

    # A stored anchor only survives while the plans stay the same
    anchor = params.get("billing_cycle_anchor")
    if anchor is None and [p.id for p in plans] == [p.id for p in prior_plans]:
        anchor = subscription.billing_cycle_anchor

    if trial_end == "now" or (trial_end is None and not trial_days):
        updates.update(
            status=SubscriptionStatus.ACTIVE,
            current_period_end=anchor or get_ending_time(start, first_plan),
            trial_start=None,
            trial_end=None,
            billing_cycle_anchor=anchor,
        )
    else:
        end = trial_end if trial_end is not None else now + int(trial_days) * SECONDS_PER_DAY
        updates.update(
            status=SubscriptionStatus.TRIALING,
            current_period_end=end,
            trial_start=start,
            trial_end=end,
            billing_cycle_anchor=anchor,
        )

    updates["items"] = StripeList[SubscriptionItem](
        data=_resolve_items(subscription, plans, params, now)
    )

    data = subscription.model_dump()
    data.update(updates)
    resolved = Subscription.model_validate(data)
    resolved.idempotency_key = subscription.idempotency_key
    return resolved


def apply_cancellation(
    subscription: Subscription,
    params: Mapping[str, Any],
    *,
    allow_clear: bool,
    now: int | None = None,
) -> Subscription:
    """Schedule or unschedule cancellation from ``cancel_at_period_end``.

    A truthy flag sets ``canceled_at`` to now. A falsy flag clears both fields
    only when ``allow_clear`` is set (updates); creates ignore it.
    """
    if "cancel_at_period_end" not in params:
        return subscription
    if parse_bool(params["cancel_at_period_end"]):
        return subscription.model_copy(
            update={
                "cancel_at_period_end": True,
                "canceled_at": now if now is not None else utc_timestamp(),
            }
        )
    if allow_clear:
        return subscription.model_copy(update={"cancel_at_period_end": False, "canceled_at": None})
    return subscription


def apply_discount(
    subscription: Subscription, coupon: Coupon, now: int | None = None
) -> Subscription:
    discount = Discount.for_subscription(
        coupon,
        subscription_id=subscription.id,
        customer_id=subscription.customer,
        start=now if now is not None else utc_timestamp(),
    )
    return subscription.model_copy(update={"discount": discount})


def clear_discount(subscription: Subscription) -> Subscription:
    return subscription.model_copy(update={"discount": None})
