from fastapi import APIRouter, Depends, Query, Response

from stripe_mock.core.errors import InvalidRequestError, assert_existence
from stripe_mock.core.store import InMemoryStore, get_store
from stripe_mock.models.plan import Plan
from stripe_mock.repositories.plan_repository import PlanRepository
from stripe_mock.schemas.plan import PlanCreate

router = APIRouter()


@router.post(
    "",
    response_model=Plan,
    summary="Create plan",
    responses={
        400: {"description": "Plan with this id already exists"},
        422: {"description": "Validation error"},
    },
)
async def create_plan(
    data: PlanCreate,
    store: InMemoryStore = Depends(get_store),
) -> Plan:
    """Create a new plan."""
    repo = PlanRepository(store)
    with store.lock:
        if data.id and repo.id_exists(data.id):
            raise InvalidRequestError(f"Plan already exists: '{data.id}'", param="id")
        return repo.create(data)


@router.get(
    "",
    response_model=list[Plan],
    summary="List plans",
)
async def list_plans(
    response: Response,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    store: InMemoryStore = Depends(get_store),
) -> list[Plan]:
    """List plans with pagination."""
    response.headers["X-Total-Count"] = str(len(store.plans))
    return PlanRepository(store).get_all(skip=skip, limit=limit)


@router.get(
    "/{plan_id}",
    response_model=Plan,
    summary="Get plan",
    responses={404: {"description": "Plan not found"}},
)
async def get_plan(
    plan_id: str,
    store: InMemoryStore = Depends(get_store),
) -> Plan:
    """Get a plan by ID."""
    return assert_existence("plan", plan_id, PlanRepository(store).get_by_id(plan_id))
