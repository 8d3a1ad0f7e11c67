"""Speaking Tracker - FastAPI Application."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .database import JsonDatabase
from .routers import (
    events_router,
    sessions_router,
    submissions_router,
    settings_router,
    imports_router,
    export_router,
    stats_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    settings = get_settings()
    print(f"🚀 Starting {settings.service_name} v{settings.service_version}")

    JsonDatabase.connect()
    print(f"✅ Using data file {settings.data_file}")

    yield

    # Shutdown
    JsonDatabase.disconnect()
    print("👋 Stopped")


settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Speaking Tracker",
    description="Conference events, talk proposals and submissions",
    version=settings.service_version,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(events_router, prefix="/api")
app.include_router(sessions_router, prefix="/api")
app.include_router(submissions_router, prefix="/api")
app.include_router(settings_router, prefix="/api")
app.include_router(imports_router, prefix="/api")
app.include_router(export_router, prefix="/api")
app.include_router(stats_router, prefix="/api")


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "docs": "/docs",
    }


@app.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "speaking_tracker.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
