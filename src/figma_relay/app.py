"""FastAPI application with lifespan and health endpoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from figma_relay.config import get_settings
from figma_relay.logging_config import configure_logging
from figma_relay.router import router as figma_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: load config and configure logging on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    yield


app = FastAPI(
    title="Figma Relay",
    lifespan=lifespan,
)
app.include_router(figma_router)


@app.get("/health")
async def health():
    """Health check endpoint for container platforms and local development."""
    return {
        "status": "ok",
        "service": "figma-relay",
        "version": "0.1.0",
    }
