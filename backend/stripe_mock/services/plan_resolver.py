"""Resolve the plans a subscription request refers to."""

from collections.abc import Mapping
from typing import Any

from stripe_mock.core.errors import assert_existence
from stripe_mock.models.plan import Plan
from stripe_mock.repositories.plan_repository import PlanRepository


def requested_items(items: Any) -> list[Mapping[str, Any]]:
    """Normalize the ``items`` param, sent either as a list or as an index-keyed mapping."""
    if not items:
        return []
    if isinstance(items, Mapping):
        items = list(items.values())
    return [item for item in items if isinstance(item, Mapping)]


def plan_ids_from_params(params: Mapping[str, Any]) -> list[str]:
    if params.get("plan"):
        return [str(params["plan"])]
    return [str(item["plan"]) for item in requested_items(params.get("items")) if item.get("plan")]


def resolve_plans(params: Mapping[str, Any], plan_repo: PlanRepository) -> list[Plan]:
    """Look up every plan referenced by ``plan`` or ``items``.

    Input order and duplicates are preserved. Raises NotFound on the first id
    with no matching plan.
    """
    return [
        assert_existence("plan", plan_id, plan_repo.get_by_id(plan_id))
        for plan_id in plan_ids_from_params(params)
    ]
