"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from device_inventory import __version__
from device_inventory.api.v1 import device_router, register_error_handlers
from device_inventory.core.config import get_settings
from device_inventory.core.logging_config import configure_logging
from device_inventory.di.container import get_container, reset_container

logger = logging.getLogger(__name__)


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - CORS middleware configuration
    - API route registration and error mapping
    - Startup/shutdown event handlers for the DI container

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()
    configure_logging()

    application = FastAPI(
        title="Device Inventory API",
        description="Inventory of physical devices with lifecycle-gated updates and deletes",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(device_router, prefix=settings.api_prefix)
    register_error_handlers(application)

    @application.on_event("startup")
    async def startup_event():
        """Build the container so store misconfiguration fails at boot."""
        get_container()
        logger.info("Device inventory started (store backend: %s)", settings.store_backend)

    @application.on_event("shutdown")
    async def shutdown_event():
        """Stop the worker pool and close the database connection."""
        reset_container()
        logger.info("Device inventory stopped")

    @application.get("/")
    async def root():
        """Root endpoint - health check."""
        return {
            "status": "running",
            "service": "Device Inventory API",
            "version": __version__,
            "docs": "/docs",
        }

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
