"""FastAPI application for the Trust Scorer service."""

import contextlib
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..infrastructure.dependencies import get_service_container
from .endpoints import health, history, verify

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    """Create providers on startup and release them on shutdown."""
    container = get_service_container()
    logging.getLogger().setLevel(container.config.log_level)
    await container.get_verification_service()
    logger.info("🚀 Trust Scorer API started")

    yield  # Application runs here

    await container.shutdown()
    logger.info("👋 Trust Scorer API stopped")


# Create FastAPI application
app = FastAPI(
    title="Trust Scorer API",
    description="Content verification API producing an explainable 0-100 trust score",
    version="0.1.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(verify.router)
app.include_router(history.router)
