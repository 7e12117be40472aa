"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mealprep import __version__
from mealprep.config import get_settings
from mealprep.logging_config import configure_logging, get_logger
from mealprep.routers import measurements_router, recipes_router

settings = get_settings()

# Configure logging on module load
configure_logging(log_level=settings.log_level)
logger = get_logger(__name__)

app = FastAPI(
    title="Mealprep API",
    description="Recipe normalization and measurement conversion",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recipes_router)
app.include_router(measurements_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "mealprep-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Mealprep API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
