"""
FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from native_yards.config import settings
from native_yards.middleware.error_handler import ErrorHandlerMiddleware
from native_yards.api.v1.routers import analytics, form, packages, waitlist

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events using the modern FastAPI pattern.
    """
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Log level: {settings.log_level}")
    logger.info(f"Backend: {settings.supabase_url} "
                f"(tables: {settings.waitlist_table}, {settings.analytics_table})")

    yield

    # Shutdown
    from native_yards.infrastructure.supabase_client import close_backend_client
    logger.info("Shutting down application...")
    await close_backend_client()
    logger.info("Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
    description="""
    Waitlist API for the Native Yards lawn conversion kits

    This API backs the landing page: it stores waitlist signups, reports the
    waitlist's combined climate impact, runs the messaging experiment and
    recommends a native yard kit from the signup answers.

    ## Features

    - **Kit Recommendation**: Plants, seeds, printed extras and pricing from
      ZIP code, yard size, goals and budget
    - **Waitlist**: Signups stored in the hosted Supabase tables
    - **Impact Stats**: Pledged yards and yearly CO₂ saved
    - **Messaging Experiment**: Deterministic A/B/C copy per visitor session
    - **Analytics Dashboard**: Conversion rate per variant, top segments and
      benefit engagement
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Add CORS middleware with configurable origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add global error handling middleware
app.add_middleware(ErrorHandlerMiddleware)

# Include routers
app.include_router(form.router, prefix="/api/v1")
app.include_router(packages.router, prefix="/api/v1")
app.include_router(waitlist.router, prefix="/api/v1")
app.include_router(analytics.router, prefix="/api/v1")


@app.get("/", tags=["health"])
async def root():
    """
    Root endpoint for health check.

    Returns:
        Status message
    """
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
    }


@app.get("/health", tags=["health"])
async def health_check():
    """
    Health check endpoint.

    Returns:
        Health status
    """
    return {
        "status": "healthy",
        "service": settings.app_name,
    }
