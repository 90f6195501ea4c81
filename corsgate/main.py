"""FastAPI application entry point."""

from typing import Any

from fastapi import FastAPI

from corsgate.core.config import settings
from corsgate.core.logging import logger, setup_logging
from corsgate.middleware.cors import setup_cors
from corsgate.models.cors import CorsOptions


def create_app(options: CorsOptions | None = None) -> FastAPI:
    """
    Build an application protected by one global CORS policy.

    Args:
        options: CORS options; the CORS_* settings are used when omitted

    Returns:
        Configured FastAPI app
    """
    setup_logging()

    app = FastAPI(
        title="corsgate",
        description="CORS negotiation for FastAPI applications",
        version="1.0.0",
    )

    setup_cors(app, options)

    @app.get("/health")
    async def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "healthy"}

    logger.info("application_starting", log_level=settings.log_level)
    return app


app = create_app()
