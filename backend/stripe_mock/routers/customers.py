from fastapi import APIRouter, Depends, Query, Response

from stripe_mock.core.errors import InvalidRequestError, assert_existence
from stripe_mock.core.store import InMemoryStore, get_store
from stripe_mock.models.customer import Customer
from stripe_mock.repositories.customer_repository import CustomerRepository
from stripe_mock.schemas.customer import CustomerCreate
from stripe_mock.services.card_service import CardService

router = APIRouter()


@router.post(
    "",
    response_model=Customer,
    summary="Create customer",
    responses={
        400: {"description": "Customer with this id already exists"},
        404: {"description": "Card token not found"},
        422: {"description": "Validation error"},
    },
)
async def create_customer(
    data: CustomerCreate,
    store: InMemoryStore = Depends(get_store),
) -> Customer:
    """Create a customer, optionally attaching a card token as its default source."""
    repo = CustomerRepository(store)
    card_service = CardService(store)
    with store.lock:
        if data.id and repo.id_exists(data.id):
            raise InvalidRequestError(f"Customer already exists: '{data.id}'", param="id")
        if data.source:
            card_service.resolve_source(data.source)
        customer = repo.create(data)
        if data.source:
            card_service.attach_source(customer, data.source)
    return customer


@router.get(
    "",
    response_model=list[Customer],
    summary="List customers",
)
async def list_customers(
    response: Response,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    store: InMemoryStore = Depends(get_store),
) -> list[Customer]:
    """List customers with pagination."""
    response.headers["X-Total-Count"] = str(len(store.customers))
    return CustomerRepository(store).get_all(skip=skip, limit=limit)


@router.get(
    "/{customer_id}",
    response_model=Customer,
    summary="Get customer",
    responses={404: {"description": "Customer not found"}},
)
async def get_customer(
    customer_id: str,
    store: InMemoryStore = Depends(get_store),
) -> Customer:
    """Get a customer by ID."""
    repo = CustomerRepository(store)
    return assert_existence("customer", customer_id, repo.get_by_id(customer_id))
