#!/usr/bin/env python3
"""Training Signup - registration form and HR dashboard web server"""

from contextlib import asynccontextmanager
from typing import Any, Mapping, Optional

import uvicorn
from fastapi import FastAPI
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from training_signup.config import config
from training_signup.logging_config import get_logger, setup_logging
from training_signup.routers.dashboard import router as dashboard_router
from training_signup.routers.health import health
from training_signup.routers.registration import router as registration_router
from training_signup.services.registration_store import RegistrationStore, build_store
from training_signup.utils.date_format import resolve_time_zone

logger = get_logger(__name__)


def create_app(
    settings: Mapping[str, Any] = config, store: Optional[RegistrationStore] = None
) -> FastAPI:
    """
    Build the web application.

    Args:
        settings: Configuration dictionary (see training_signup.config)
        store: Pre-built store to use instead of one built from settings

    Returns:
        The FastAPI application with its store attached to ``app.state``
    """
    setup_logging(settings.get("log_level"))

    if store is None:
        store = build_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.get("create_tables"):
            logger.info("Creating database tables")
            store.create_tables()
        yield
        await store.close()

    app = FastAPI(
        title="Training Signup",
        description="Internal training registration form and HR dashboard",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,  # Disable default docs
        redoc_url=None,  # Disable default redoc
    )

    # Trust proxy headers so request.url.scheme reflects the original protocol
    app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

    app.state.settings = settings
    app.state.store = store
    app.state.display_tz = resolve_time_zone(settings.get("display_time_zone"))

    app.include_router(health)
    app.include_router(registration_router)
    app.include_router(dashboard_router)

    return app


app = create_app()


if __name__ == "__main__":
    port = config.get("port")
    logger.info(f"Starting Training Signup on 0.0.0.0:{port}")
    logger.info("Registration form available at /")
    logger.info("HR dashboard available at /rh")

    try:
        uvicorn.run(
            app, host="0.0.0.0", port=port, log_level=config["log_level"].lower()
        )
    except Exception as e:
        logger.error(f"Failed to start server: {e}")
        raise
