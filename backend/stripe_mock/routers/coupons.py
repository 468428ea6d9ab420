from fastapi import APIRouter, Depends, Query, Response

from stripe_mock.core.errors import InvalidRequestError, assert_existence
from stripe_mock.core.store import InMemoryStore, get_store
from stripe_mock.models.coupon import Coupon
from stripe_mock.repositories.coupon_repository import CouponRepository
from stripe_mock.schemas.coupon import CouponCreate

router = APIRouter()


@router.post(
    "",
    response_model=Coupon,
    summary="Create coupon",
    responses={
        400: {"description": "Coupon with this id already exists"},
        422: {"description": "Validation error"},
    },
)
async def create_coupon(
    data: CouponCreate,
    store: InMemoryStore = Depends(get_store),
) -> Coupon:
    """Create a new coupon."""
    repo = CouponRepository(store)
    with store.lock:
        if data.id and repo.id_exists(data.id):
            raise InvalidRequestError(f"Coupon already exists: '{data.id}'", param="id")
        return repo.create(data)


@router.get(
    "",
    response_model=list[Coupon],
    summary="List coupons",
)
async def list_coupons(
    response: Response,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    store: InMemoryStore = Depends(get_store),
) -> list[Coupon]:
    """List coupons with pagination."""
    response.headers["X-Total-Count"] = str(len(store.coupons))
    return CouponRepository(store).get_all(skip=skip, limit=limit)


@router.get(
    "/{coupon_id}",
    response_model=Coupon,
    summary="Get coupon",
    responses={404: {"description": "Coupon not found"}},
)
async def get_coupon(
    coupon_id: str,
    store: InMemoryStore = Depends(get_store),
) -> Coupon:
    """Get a coupon by ID."""
    return assert_existence("coupon", coupon_id, CouponRepository(store).get_by_id(coupon_id))
