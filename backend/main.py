"""
FastAPI application entry point for the x402 Partner Program.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from app.config import settings
from app.database import create_tables
from app.logging_config import setup_logging
from app.rate_limit import limiter, rate_limit_exceeded_handler
from app.routers import pages, partners, earnings
from app.services.errors import PartnerServiceError

SERVICE_NAME = "x402-partners"
SERVICE_VERSION = "1.0.0"

# Get logger for request logging
logger = logging.getLogger(__name__)

# Configure logging
setup_logging(settings.LOG_LEVEL, sql_echo=settings.DATABASE_ECHO)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    logger.info("Starting up x402 Partner Program...")
    if settings.CREATE_TABLES_ON_STARTUP:
        await create_tables()
        logger.info("Database tables ensured")
    yield
    # Shutdown
    logger.info("Shutting down x402 Partner Program...")


app = FastAPI(
    title="x402 Partner Program",
    description="Partner onboarding, earnings ledger and dashboards for x402 integrations",
    version=SERVICE_VERSION,
    lifespan=lifespan
)

# Configure rate limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)


@app.exception_handler(PartnerServiceError)
async def partner_service_error_handler(request: Request, exc: PartnerServiceError):
    """Render domain errors as the {success: false, error} envelope."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.message},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "error": str(exc)},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client errors, reported in the same envelope."""
    messages = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"] if part != "body")
        messages.append(f"{field}: {err['msg']}" if field else err["msg"])
    details = "; ".join(messages)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "error": details or "Invalid request"},
    )


# Parse CORS origins from config
# In development mode, allow all origins for easier local development
if settings.ENVIRONMENT == "development" or settings.DEBUG:
    cors_origins = ["*"]
else:
    cors_origins = (
        ["*"] if settings.CORS_ORIGINS == "*"
        else [origin.strip() for origin in settings.CORS_ORIGINS.split(",")]
    )

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all incoming requests with method, path, origin, and response status."""
    origin = request.headers.get("origin", "no-origin")
    logger.info(f"Request: {request.method} {request.url.path} | Origin: {origin}")

    response = await call_next(request)

    logger.info(f"Response: {request.method} {request.url.path} | Status: {response.status_code}")
    return response


# Security headers middleware
@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    """Add security headers to all responses. The embed widget stays frameable."""
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    if not request.url.path.startswith("/embed/"):
        response.headers["X-Frame-Options"] = "DENY"
    response.headers["X-XSS-Protection"] = "1; mode=block"
    response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
    return response


# Register routers
app.include_router(pages.router, tags=["pages"])
app.include_router(partners.router, tags=["partners"])
app.include_router(earnings.router, tags=["earnings"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok", "service": SERVICE_NAME}


@app.get("/api")
async def api_directory():
    """Machine-readable list of routes."""
    return {
        "service": "x402 Partner Program",
        "version": SERVICE_VERSION,
        "endpoints": {
            "GET /": "Landing page",
            "GET /onboard": "Partner registration form",
            "GET /partners/:id": "Partner dashboard",
            "GET /embed/:id": "Embeddable widget",
            "GET /leaderboard": "Partner leaderboard",
            "GET /admin": "Admin dashboard",
            "POST /api/partners": "Create partner",
            "GET /api/partners": "List partners",
            "GET /api/partners/:id": "Get partner",
            "POST /api/earnings": "Record earning",
            "POST /api/seed-prospects": "Create pending partners from the prospect list",
            "POST /api/simulate-earnings": "Generate random earnings for active partners",
            "GET /health": "Health check",
        },
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
