"""
Auth Service - FastAPI Application

Login endpoint that verifies credentials against the credential service and
issues session tokens.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from authservice.config import get_settings
from authservice.routers import auth, health
from authservice.services.credential_client import close_credential_client

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    """Configure root logging once at startup."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Configure logging

    Shutdown:
    - Close the credential service HTTP client
    """
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Starting up Auth Service...")

    yield

    logger.info("Shutting down Auth Service...")
    await close_credential_client()
    logger.info("Credential service client closed")


app = FastAPI(
    title="Auth Service API",
    description="""
## Login Authentication API

Verifies a login identifier and password against the credential service and
returns a session token.

Obtain a token via `POST /auth/login`.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(auth.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Auth Service API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
