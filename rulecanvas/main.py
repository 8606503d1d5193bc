"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rulecanvas import __version__
from rulecanvas.api import evaluate_router, get_loader, metrics_router, rules_router
from rulecanvas.core import configure_logging, get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    configure_logging()
    settings = get_settings()
    logger.info("Starting %s...", settings.app_name)
    logger.info("Rules directory: %s", settings.rules_dir)

    loader = get_loader()
    logger.info("Loaded %d rules", len(loader.get_all_rules()))

    yield

    # Shutdown
    logger.info("Shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Evaluation, rendering and validation of block-based rules",
        version=__version__,
        lifespan=lifespan,
    )

    # CORS middleware - configurable via CORS_ORIGINS env var
    cors_origins = (
        settings.cors_origins.split(",") if settings.cors_origins != "*" else ["*"]
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(rules_router)     # /rules
    app.include_router(evaluate_router)  # /evaluate
    app.include_router(metrics_router)   # /metrics

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": settings.app_name,
            "version": __version__,
            "endpoints": {
                "rules": "/rules - Stored rules, validation and rendering",
                "evaluate": "/evaluate - Rule evaluation with execution trace",
                "metrics": "/metrics/snapshot - Live system metrics",
            },
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
