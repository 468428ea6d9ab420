from fastapi import APIRouter, Depends

from stripe_mock.core.errors import assert_existence
from stripe_mock.core.store import InMemoryStore, get_store
from stripe_mock.models.card import Token
from stripe_mock.repositories.card_token_repository import CardTokenRepository
from stripe_mock.schemas.token import TokenCreate

router = APIRouter()


@router.post(
    "",
    response_model=Token,
    summary="Create card token",
    responses={422: {"description": "Validation error"}},
)
async def create_token(
    data: TokenCreate | None = None,
    store: InMemoryStore = Depends(get_store),
) -> Token:
    """Create a single-use card token. Defaults to a test Visa card."""
    return CardTokenRepository(store).create(data or TokenCreate())


@router.get(
    "/{token_id}",
    response_model=Token,
    summary="Get card token",
    responses={404: {"description": "Token not found or already used"}},
)
async def get_token(
    token_id: str,
    store: InMemoryStore = Depends(get_store),
) -> Token:
    """Get an unused card token by ID."""
    return assert_existence("token", token_id, CardTokenRepository(store).get_by_id(token_id))
