"""FastAPI application entry point."""
import logging

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from starlette.exceptions import HTTPException

from brokerage.core.config import settings
from brokerage.core.exceptions import BrokerageError
from brokerage.core.structured_logging import REQUEST_ID_HEADER, configure_logging, log_requests
from brokerage.db.session import engine

configure_logging()
logger = logging.getLogger(__name__)

# ============================================================================
# Sentry Integration (optional, for production error tracking)
# ============================================================================

if settings.SENTRY_DSN and settings.ENV != "dev":
    import sentry_sdk
    from sentry_sdk.integrations.fastapi import FastApiIntegration
    from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENV,
        integrations=[
            FastApiIntegration(transaction_style="endpoint"),
            SqlalchemyIntegration(),
        ],
        traces_sample_rate=0.1,
        send_default_pii=False,  # Don't send PII to Sentry
    )
    logging.info("Sentry initialized for error tracking")

# ============================================================================
# Rate Limiting
# ============================================================================

from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from brokerage.core.rate_limit import limiter

# ============================================================================
# FastAPI App
# ============================================================================

app = FastAPI(
    title="Letify Realty API",
    description="Back office for the brokerage marketing site",
    version=settings.VERSION,
    docs_url="/docs" if settings.ENV == "dev" else None,
    redoc_url="/redoc" if settings.ENV == "dev" else None,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
    expose_headers=[REQUEST_ID_HEADER, "Content-Disposition"],
    max_age=600,
)

app.middleware("http")(log_requests)

# ============================================================================
# Error Handlers
# ============================================================================


@app.exception_handler(BrokerageError)
async def brokerage_error_handler(request: Request, exc: BrokerageError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Body/query validation failures as 400 naming the offending fields."""
    fields: list[str] = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        name = ".".join(loc) or "body"
        if name not in fields:
            fields.append(name)
    return JSONResponse(
        status_code=400,
        content={"error": f"Missing or invalid fields: {', '.join(fields)}"},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ============================================================================
# Routers
# ============================================================================

from brokerage.routers import (
    account_router,
    admin_router,
    bookings_router,
    contact_router,
    properties_router,
    property_inquiries_router,
)

health_router = APIRouter(tags=["health"])


@health_router.get("/health")
def health():
    """
    Health check endpoint.

    Verifies database connectivity. The environment name is only reported
    in dev.
    """
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    body = {"status": "ok", "version": settings.VERSION}
    if settings.ENV == "dev":
        body["env"] = settings.ENV
    return body


# Load balancers hit the bare path
app.include_router(health_router)

api = APIRouter(prefix=settings.API_PREFIX)
api.include_router(health_router)
api.include_router(contact_router)
api.include_router(properties_router)
api.include_router(property_inquiries_router)
api.include_router(bookings_router)
api.include_router(account_router)
api.include_router(admin_router)
app.include_router(api)
