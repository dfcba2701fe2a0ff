import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from . import config
from . import models  # noqa: F401  # register tables with Base
from .database import Base, engine
from .domain.chemical_usage import router as chemical_usage_router
from .domain.customers import router as customers_router
from .domain.notes import router as notes_router
from .domain.service_logs import router as service_logs_router
from .routes.dashboard import router as dashboard_router
from .routes.pages import router as pages_router
from .routes.reports import router as reports_router
from .routes.route_order import router as route_order_router
from .routes.vocabularies import router as vocabularies_router
from .security_headers import SecurityHeadersMiddleware
from .utils.sanitization import sanitize_string

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
        logger.info("Database tables created successfully")
    except Exception as e:
        # Ignore "already exists" errors from race conditions between workers
        error_msg = str(e)
        if "already exists" in error_msg or "duplicate key" in error_msg:
            logger.info("Database tables already exist (created by another worker)")
        else:
            logger.error(f"Failed to create database tables: {e}")
            raise

    yield
    logger.info("Application shutting down...")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Convert 422 validation errors from HTTPBearer to 401 authentication errors
    when the issue is with the Authorization header
    """
    for error in exc.errors():
        if error.get("loc") and "authorization" in str(error.get("loc")).lower():
            logger.warning(
                f"Authentication failed for {request.url.path}: Missing or invalid Authorization header"
            )
            return JSONResponse(
                status_code=401,
                content={
                    "detail": "Not authenticated. Please provide a valid Bearer token in the Authorization header."
                },
            )

    # For other validation errors, return 422 as normal
    logger.warning(f"Validation error for {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(exc.errors())})


def render_startup_error(missing: list[str]) -> str:
    items = "".join(f"<li><code>{sanitize_string(name)}</code></li>" for name in missing)
    return f"""<!DOCTYPE html>
<html lang="en">
  <head><meta charset="utf-8"><title>Startup Error</title></head>
  <body style="font-family: sans-serif; padding: 32px; color: #0f172a;">
    <h1 style="color: #ef4444;">Startup Error</h1>
    <p>The service is missing required configuration:</p>
    <ul>{items}</ul>
    <p>Set these environment variables (or add them to <code>.env</code>) and restart.</p>
  </body>
</html>
"""


def create_startup_error_app(missing: list[str]) -> FastAPI:
    """Application that answers every request with the configuration error page"""
    error_app = FastAPI(title="Pool Route API - Startup Error")
    page = render_startup_error(missing)

    @error_app.api_route(
        "/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]
    )
    async def startup_error(path: str):
        return HTMLResponse(content=page, status_code=500)

    return error_app


def create_app() -> FastAPI:
    missing = config.missing_required_settings()
    if missing:
        logger.error(f"❌ Missing required configuration: {', '.join(missing)}")
        return create_startup_error_app(missing)

    app = FastAPI(title="Pool Route API", version="1.0.0", lifespan=lifespan)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        try:
            response = await call_next(request)
            return response
        except Exception as e:
            logger.error(f"{request.method} {request.url.path} - Error: {str(e)}")
            raise

    if config.SECURITY_HEADERS_ENABLED:
        app.add_middleware(
            SecurityHeadersMiddleware, exclude_paths=["/health", "/docs", "/openapi.json"]
        )
        logger.info("Security headers enabled")
    else:
        logger.warning("Security headers DISABLED - only use in development!")

    logger.info(f"CORS allowed origins: {config.ALLOWED_ORIGINS}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["*"],
    )

    # Record collections
    app.include_router(customers_router)
    app.include_router(service_logs_router)
    app.include_router(chemical_usage_router)
    app.include_router(notes_router)

    # Route, dashboard and report views
    app.include_router(route_order_router)
    app.include_router(dashboard_router)
    app.include_router(reports_router)
    app.include_router(pages_router)
    app.include_router(vocabularies_router)

    @app.get("/")
    def root():
        return {"message": "Pool Route API is running"}

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


app = create_app()
