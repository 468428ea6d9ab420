"""Create, retrieve and update subscription schedules."""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from stripe_mock.core.errors import InvalidRequestError, assert_existence
from stripe_mock.core.idempotency import check_idempotency, get_idempotency_key
from stripe_mock.core.store import InMemoryStore
from stripe_mock.models.customer import Customer
from stripe_mock.models.plan import Plan
from stripe_mock.models.shared import new_id, utc_timestamp
from stripe_mock.models.subscription import Subscription
from stripe_mock.repositories.coupon_repository import CouponRepository
from stripe_mock.repositories.customer_repository import CustomerRepository
from stripe_mock.repositories.plan_repository import PlanRepository
from stripe_mock.repositories.subscription_repository import SubscriptionRepository
from stripe_mock.services.card_service import CardService
from stripe_mock.services.plan_resolver import resolve_plans
from stripe_mock.services.subscription_changes import (
    apply_cancellation,
    apply_discount,
    clear_discount,
    resolve_subscription_changes,
)
from stripe_mock.services.subscription_validation import (
    verify_active_status,
    verify_card_present,
    verify_coupon,
    verify_currency,
    verify_known_params,
    verify_plans_present,
    verify_trial_end,
)

logger = logging.getLogger(__name__)


class SubscriptionScheduleService:
    """Service for the subscription schedule create/retrieve/update operations.

    Each operation runs under the store lock and commits only after every
    check has passed, so a failed request leaves the store untouched.
    """

    def __init__(self, store: InMemoryStore):
        self.store = store
        self.subscription_repo = SubscriptionRepository(store)
        self.customer_repo = CustomerRepository(store)
        self.plan_repo = PlanRepository(store)
        self.coupon_repo = CouponRepository(store)
        self.card_service = CardService(store)

    def create(
        self,
        params: Mapping[str, Any],
        headers: Mapping[str, str] | None = None,
    ) -> Subscription:
        """Create a subscription schedule, or replay the one created with the same key.

        Args:
            params: Request parameters.
            headers: Request headers; may carry an ``Idempotency-Key``.

        Returns:
            The new subscription, or the original one on idempotent replay.

        Raises:
            StripeMockError: If any lookup or validation fails.
        """
        params = dict(params)
        with self.store.lock:
            replay = check_idempotency(headers, self.subscription_repo)
            if replay is not None:
                return replay

            plans = resolve_plans(params, self.plan_repo)
            customer_id = str(params.get("customer") or "")
            customer = assert_existence(
                "customer", customer_id, self.customer_repo.get_by_id(customer_id)
            )
            verify_currency(customer, plans)

            source = params.pop("source", None)
            card = self.card_service.resolve_source(source) if source else None

            verify_known_params(params)
            verify_plans_present(plans)
            if params.get("id") and self.subscription_repo.get_by_id(str(params["id"])):
                raise InvalidRequestError(
                    f"Subscription already exists: '{params['id']}'", param="id"
                )
            if params.get("trial_end") is not None:
                verify_trial_end(params["trial_end"])
            coupon = None
            if params.get("coupon"):
                coupon = verify_coupon(str(params["coupon"]), self.coupon_repo)

            now = utc_timestamp()
            skeleton = Subscription(
                id=str(params.get("id") or new_id("sub")),
                created=now,
                start_date=now,
                current_period_start=now,
            )
            subscription = self._resolve_changes(skeleton, plans, customer, params, now)
            subscription.idempotency_key = get_idempotency_key(headers)

            # Needs the resolved items, so it runs after change resolution
            verify_card_present(
                customer, subscription.plan, subscription, params, pending_source=card
            )

            if coupon is not None:
                subscription = apply_discount(subscription, coupon, now)
            subscription = apply_cancellation(subscription, params, allow_clear=False, now=now)

            if source:
                self.card_service.attach_source(customer, source)
            self.customer_repo.adopt_currency(customer, plans[0].currency)
            if coupon is not None:
                self.coupon_repo.redeem(coupon)
            self.subscription_repo.create(subscription, customer)

        logger.info(
            "Created subscription %s for customer %s with %d item(s)",
            subscription.id,
            customer.id,
            len(subscription.items.data),
        )
        return subscription

    def retrieve(self, subscription_id: str) -> Subscription:
        return assert_existence(
            "subscription", subscription_id, self.subscription_repo.get_by_id(subscription_id)
        )

    def update(
        self,
        subscription_id: str,
        params: Mapping[str, Any],
        headers: Mapping[str, str] | None = None,
    ) -> Subscription:
        """Apply a partial update to an existing subscription schedule.

        Plans, coupon, cancellation and trial are only changed when the request
        mentions them; everything else is carried over from the stored record.
        The recomputed record replaces the stored one in a single store write.

        Raises:
            StripeMockError: If any lookup or validation fails.
        """
        params = dict(params)
        with self.store.lock:
            subscription = self.retrieve(subscription_id)
            verify_active_status(subscription)
            customer_id = subscription.customer or ""
            customer = assert_existence(
                "customer", customer_id, self.customer_repo.get_by_id(customer_id)
            )

            source = params.pop("source", None)
            card = self.card_service.resolve_source(source) if source else None

            plans: list[Plan] = resolve_plans(params, self.plan_repo)
            if plans:
                verify_currency(customer, plans)
            else:
                # plans are unchanged but still returned in full
                plans = subscription.item_plans()

            if params.get("trial_end") is not None:
                verify_trial_end(params["trial_end"])

            now = utc_timestamp()
            working = subscription.model_copy(deep=True)
            coupon = None
            if params.get("coupon") is not None:
                if params["coupon"] == "":
                    working = clear_discount(working)
                else:
                    coupon = verify_coupon(str(params["coupon"]), self.coupon_repo)
                    working = apply_discount(working, coupon, now)

            working = apply_cancellation(working, params, allow_clear=True, now=now)

            params["current_period_start"] = subscription.current_period_start
            params["trial_end"] = params.get("trial_end") or subscription.trial_end

            plan_amount_was = subscription.plan.amount if subscription.plan else None
            updated = self._resolve_changes(working, plans, customer, params, now)
            plan_amount = updated.plan.amount if updated.plan else None
            if plan_amount_was == 0 and plan_amount:
                verify_card_present(customer, updated.plan, updated, params, pending_source=card)

            if source:
                self.card_service.attach_source(customer, source)
            if coupon is not None:
                self.coupon_repo.redeem(coupon)
            self.subscription_repo.replace(updated, customer)

        logger.info("Updated subscription %s", updated.id)
        return updated

    def _resolve_changes(
        self,
        subscription: Subscription,
        plans: list[Plan],
        customer: Customer,
        params: Mapping[str, Any],
        now: int,
    ) -> Subscription:
        try:
            return resolve_subscription_changes(subscription, plans, customer, params, now=now)
        except ValidationError as exc:
            error = exc.errors()[0]
            param = ".".join(str(part) for part in error["loc"]) or None
            raise InvalidRequestError(f"Invalid {param}: {error['msg']}", param=param) from exc
