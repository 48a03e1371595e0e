"""
Raster Workbench - Main FastAPI Application
"""

import logging
import sys
import threading
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Add parent directory to path
sys.path.append(str(Path(__file__).parent))

from api.exceptions import register_exception_handlers  # noqa: E402
from api.routers import edit, image, system  # noqa: E402
from config import get_settings  # noqa: E402
from core.registry import ImageRegistry  # noqa: E402

# Get configuration
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.system.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Suppress watchfiles debug messages
logging.getLogger("watchfiles").setLevel(logging.WARNING)


def init_state(app: FastAPI) -> None:
    """Create a fresh registry and its lock in app state"""
    app.state.registry = ImageRegistry()
    app.state.registry_lock = threading.RLock()
    app.state.config = settings.to_dict()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle"""
    logger.info("Starting Raster Workbench server...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Workspace: {settings.image.workspace_dir}")
    logger.info(f"Upscaling allowed: {settings.image.allow_upscale}")

    init_state(app)

    yield

    logger.info(f"Shutting down with {len(app.state.registry)} images in registry")


# Create FastAPI app
app = FastAPI(
    title="Raster Workbench",
    description="Named-image raster editing engine",
    version="1.0.0",
    lifespan=lifespan,
)

if settings.api.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Register exception handlers
register_exception_handlers(app)

# Include routers
app.include_router(image.router, prefix="/api/images", tags=["Images"])
app.include_router(edit.router, prefix="/api/edit", tags=["Edit"])
app.include_router(system.router, prefix="/api/system", tags=["System"])


# Root endpoint
@app.get("/")
async def root():
    return {
        "name": "Raster Workbench",
        "status": "running",
        "version": "1.0.0",
        "endpoints": {
            "images": "/api/images",
            "edit": "/api/edit",
            "system": "/api/system",
            "docs": "/docs",
        },
    }


if __name__ == "__main__":
    server_config = uvicorn.Config(
        "main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.system.debug,
        log_level=settings.system.log_level.lower(),
    )
    server = uvicorn.Server(server_config)

    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")
