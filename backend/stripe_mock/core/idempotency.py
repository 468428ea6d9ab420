"""Idempotent replay for create requests.

The ``Idempotency-Key`` header makes a create safe to retry: when a
subscription was already created with the same key, that subscription is
returned as-is and nothing else runs (no validation, no second write).
"""

import logging
from collections.abc import Mapping

from stripe_mock.models.subscription import Subscription
from stripe_mock.repositories.subscription_repository import SubscriptionRepository

logger = logging.getLogger(__name__)

IDEMPOTENCY_HEADER = "Idempotency-Key"


def get_idempotency_key(headers: Mapping[str, str] | None) -> str | None:
    """Pull the idempotency key out of request headers.

    Accepts the HTTP header in any case as well as the ``idempotency_key``
    spelling used by in-process callers.
    """
    if not headers:
        return None
    for name, value in headers.items():
        if name.lower() in ("idempotency-key", "idempotency_key") and value:
            return str(value)
    return None


def check_idempotency(
    headers: Mapping[str, str] | None,
    repo: SubscriptionRepository,
) -> Subscription | None:
    """Return the subscription previously created with the request's key, if any.

    The key maps to a subscription id, so a replay after an update returns the
    current record rather than a snapshot of the original create response.
    """
    key = get_idempotency_key(headers)
    if key is None or repo.count() == 0:
        return None

    existing = repo.get_by_idempotency_key(key)
    if existing is not None:
        logger.info("Replaying subscription %s for idempotency key %s", existing.id, key)
    return existing
