import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from order_intake import __version__
from order_intake.api.router import api_router
from order_intake.config import Settings, settings
from order_intake.middleware.logging import RequestLoggingMiddleware

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app_settings: Settings = app.state.settings
    logger.info(
        "Starting order intake %s (env=%s, tz=%s, dayfirst=%s, incoterms=%s)",
        __version__,
        app_settings.environment,
        app_settings.timezone,
        app_settings.date_dayfirst,
        app_settings.default_incoterms,
    )
    yield
    logger.info("Shutting down order intake %s", __version__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the order intake API around the given settings."""
    app = FastAPI(
        title="Order Intake",
        description="Keyword-driven extraction of transport orders from freight document text",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings or settings

    app.add_middleware(RequestLoggingMiddleware)
    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
