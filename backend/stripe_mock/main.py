import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from stripe_mock.core.config import settings
from stripe_mock.core.errors import StripeMockError
from stripe_mock.core.logger import setup_logging
from stripe_mock.routers import coupons, customers, plans, subscription_schedules, tokens

setup_logging()
logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {"name": "Customers", "description": "Seed and read customers."},
    {"name": "Plans", "description": "Seed and read billing plans."},
    {"name": "Coupons", "description": "Seed and read discount coupons."},
    {"name": "Tokens", "description": "Create single-use card tokens."},
    {
        "name": "Subscription Schedules",
        "description": "Create, retrieve and update subscription schedules.",
    },
]

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.version,
    debug=settings.DEBUG,
    description=(
        "An in-memory mock of a subscription-management API. "
        "Simulates subscription schedule create, retrieve and update against "
        "seeded customers, plans, coupons and card tokens."
    ),
    openapi_tags=OPENAPI_TAGS,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Total-Count"],
)


@app.exception_handler(StripeMockError)
async def stripe_mock_error_handler(request: Request, exc: StripeMockError) -> JSONResponse:
    """Render a mock error in the remote API's error envelope."""
    logger.warning(
        "%s %s failed: %s (%s, param=%s)",
        request.method,
        request.url.path,
        exc.message,
        exc.kind.value,
        exc.param,
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


app.include_router(customers.router, prefix="/v1/customers", tags=["Customers"])
app.include_router(plans.router, prefix="/v1/plans", tags=["Plans"])
app.include_router(coupons.router, prefix="/v1/coupons", tags=["Coupons"])
app.include_router(tokens.router, prefix="/v1/tokens", tags=["Tokens"])
app.include_router(
    subscription_schedules.router,
    prefix="/v1/subscription_schedules",
    tags=["Subscription Schedules"],
)


@app.get("/")
async def root() -> dict[str, str]:
    return {
        "app": settings.APP_NAME,
        "version": settings.version,
        "status": "running",
    }
