"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize the FastAPI application (title, version, lifespan)
  - Configure middleware (CORS, request context)
  - Mount the marketplace routes at the root path
  - Expose greeting, health, readiness and metrics endpoints

Collaborators:
  - FastAPI / CORSMiddleware
  - RequestContextMiddleware: request id, access log, HTTP metrics
  - interfaces.api.http.router: users, listings, bookings, payments,
    promotion requests
  - infrastructure.db: MongoDB client lifecycle

Constraints:
  - CORS origins come from ALLOWED_ORIGINS (comma-separated)
  - In test environments (APP_ENV=test) no MongoDB client is created; the
    container serves in-memory repositories instead

Notes:
  - Middleware order: RequestContext -> CORS -> routes
  - /healthz and /readyz follow the Kubernetes liveness/readiness convention
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from ..crosscutting.config import get_settings
from ..crosscutting.logger import logger
from ..crosscutting.metrics import get_metrics_response
from ..crosscutting.middleware import RequestContextMiddleware
from ..infrastructure.db import close_client, ensure_indexes, get_database
from ..infrastructure.db import init_client, ping
from ..interfaces.api.http.router import router
from .exception_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle: MongoDB client, indexes, ping."""
    settings = get_settings()

    if settings.is_test():
        logger.info("decorbook API starting (in-memory repositories)")
        yield
        return

    init_client(
        settings.mongodb_uri,
        settings.mongodb_db_name,
        timeout_ms=settings.mongodb_timeout_ms,
    )
    try:
        ensure_indexes(get_database())
        if ping():
            logger.info(
                "Pinged your deployment. You successfully connected to MongoDB!"
            )

        logger.info(
            "decorbook API starting up",
            extra={
                "app_env": settings.app_env,
                "db_name": settings.mongodb_db_name,
                "identity_provider": settings.identity_provider,
                "fake_payments": settings.fake_payments,
            },
        )

        yield

    finally:
        close_client()
        logger.info("decorbook API shutting down")


app = FastAPI(
    title="Decoration Booking API",
    version="0.1.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "users", "description": "Login upsert, roles, user management"},
        {"name": "decorations", "description": "Service listings"},
        {"name": "decorators", "description": "Decorator listing and availability"},
        {"name": "decorator-requests", "description": "Promotion requests"},
        {"name": "payments", "description": "Hosted checkout and confirmation"},
        {"name": "bookings", "description": "Booking workflow"},
    ],
)

app.add_middleware(RequestContextMiddleware)

_settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.get_allowed_origins_list(),
    allow_credentials=_settings.cors_allow_credentials,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Request-Id"],
)

app.include_router(router)

register_exception_handlers(app)


@app.get("/", response_class=PlainTextResponse, tags=["health"])
def root():
    return "Hello from Server.."


@app.get("/healthz", tags=["health"])
def healthz(request: Request):
    """
    Liveness plus a store ping.

    Returns:
        ok: True when the store answers (always True with in-memory stores)
        db: "connected", "disconnected" or "in-memory"
        request_id: correlation id of this request
    """
    if get_settings().is_test():
        db_status = "in-memory"
    else:
        db_status = "connected" if ping() else "disconnected"

    return {
        "ok": db_status != "disconnected",
        "db": db_status,
        "request_id": getattr(request.state, "request_id", None),
    }


@app.get("/readyz", tags=["health"])
def readyz(request: Request):
    """Readiness: 503 while the store is unreachable."""
    if get_settings().is_test() or ping():
        return {"ok": True, "request_id": getattr(request.state, "request_id", None)}

    logger.warning("Ready check: MongoDB unavailable")
    return JSONResponse(
        status_code=503,
        content={
            "ok": False,
            "db": "disconnected",
            "request_id": getattr(request.state, "request_id", None),
        },
    )


@app.get("/metrics", tags=["health"])
def metrics():
    """Prometheus text exposition of the application registry."""
    body, content_type = get_metrics_response()
    return Response(content=body, media_type=content_type)
