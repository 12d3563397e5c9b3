# performance_api/main.py
from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from performance_api.core.config import get_settings
from performance_api.core.auth import bearer_scheme
from performance_api.core.errors import APIError, AuthenticationError
from performance_api.core.security import verify_token
from performance_api.database import create_db_and_tables, db_url

# Import models so SQLModel metadata is populated before create_all()
from performance_api.models import user as _user_models  # noqa: F401
from performance_api.models import player as _player_models  # noqa: F401
from performance_api.models import stat as _stat_models  # noqa: F401
from performance_api.models import training as _training_models  # noqa: F401
from performance_api.models import evaluation as _evaluation_models  # noqa: F401

# Routers
from performance_api.routers.auth import router as auth_router
from performance_api.routers.auth import logout_router
from performance_api.routers.players import router as players_router
from performance_api.routers.stats import router as stats_router
from performance_api.routers.training import router as training_router
from performance_api.routers.evaluations import router as evaluations_router

settings = get_settings()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Create tables on the configured SQLite database.

    Shutdown:
      - No special cleanup needed for sync engine.
    """
    logger.info("🔄 Startup: using database %s", db_url)
    try:
        create_db_and_tables()
        logger.info("✅ Startup: tables verified.")
    except Exception as e:
        logger.error(f"❌ Startup: database initialisation FAILED: {e}")
        raise
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.API_VERSION,
    lifespan=lifespan,
)


# --- CORS configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every incoming request (method + path)."""
    logger.info("%s %s", request.method, request.url.path)
    return await call_next(request)


# --- Error bodies: {"error": ..., "message"?: ...} ---


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unmatched path or method => the route does not exist for this request.
    if not isinstance(exc, APIError) and exc.status_code in (
        status.HTTP_404_NOT_FOUND,
        status.HTTP_405_METHOD_NOT_ALLOWED,
    ):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "error": "Endpoint not found",
                "message": f"{request.method} {request.url.path} is not a valid endpoint",
            },
        )

    body = {"error": exc.detail}
    message = getattr(exc, "message", None)
    if message:
        body["message"] = message
    return JSONResponse(
        status_code=exc.status_code,
        content=body,
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Schema/type/range failures are plain 400s.

    The body is decoded before route dependencies run, so a malformed JSON
    body on a token-gated path would otherwise be reported ahead of a
    missing or bad token. Check the token first in that case.
    """
    if request.url.path.startswith("/api/") and any(
        err["type"] == "json_invalid" for err in exc.errors()
    ):
        credentials = await bearer_scheme(request)
        try:
            verify_token(credentials.credentials if credentials else None)
        except AuthenticationError as auth_exc:
            return await http_exception_handler(request, auth_exc)

    problems = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"] if part not in ("body", "path", "query"))
        problems.append(f"{field}: {err['msg']}" if field else err["msg"])
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request", "message": "; ".join(problems)},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last resort: log everything, tell the client little (unless development)."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "message": str(exc) if settings.is_development else "Something went wrong",
        },
    )


app.include_router(auth_router)
app.include_router(logout_router)
app.include_router(players_router)
app.include_router(stats_router)
app.include_router(training_router)
app.include_router(evaluations_router)


@app.get("/health")
def health():
    """Health check endpoint."""
    return {
        "status": "OK",
        "message": "Player Performance API is running",
        "environment": settings.ENVIRONMENT,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/")
def root():
    """Welcome document listing the available endpoints."""
    return {
        "message": "Welcome to the Player Performance API",
        "version": settings.API_VERSION,
        "description": "REST API for tracking athletes, match performance, training, and evaluations.",
        "endpoints": {
            "health": "GET /health",
            "auth": {
                "register": "POST /auth/register",
                "login": "POST /auth/login",
                "logout": "POST /api/logout",
            },
            "players": {
                "list": "GET /api/players",
                "getById": "GET /api/players/:id",
                "create": "POST /api/players",
                "update": "PUT /api/players/:id",
                "delete": "DELETE /api/players/:id",
            },
            "stats": {
                "listByPlayer": "GET /api/stats/:playerId",
                "create": "POST /api/stats",
            },
            "training": {
                "listByPlayer": "GET /api/training-sessions/:playerId",
                "create": "POST /api/training-sessions",
            },
            "evaluations": {
                "listByPlayer": "GET /api/evaluations/:playerId",
                "create": "POST /api/evaluations",
            },
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("performance_api.main:app", host="0.0.0.0", port=settings.PORT)
