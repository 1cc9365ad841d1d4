"""
FastAPI app assembly: logging, middleware, router wiring and store lifecycle.

``create_app`` receives the content store explicitly. When none is given it
builds one from settings and then owns it, closing it on shutdown.
"""
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)

from studio.api.bookings import router as bookings_router
from studio.api.contacts import router as contacts_router
from studio.api.portfolio import router as portfolio_router
from studio.api.support import router as support_router
from studio.api.users import router as users_router
from studio.storage import ContentStore, create_store, seed_default_portfolio
from studio.utils.settings import StudioSettings, get_settings


def create_app(
    store: Optional[ContentStore] = None,
    settings: Optional[StudioSettings] = None,
) -> FastAPI:
    settings = settings or get_settings()
    owns_store = store is None
    if store is None:
        store = create_store(settings)
    if settings.seed_portfolio:
        seed_default_portfolio(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("app_startup: backend=%s log_level=%s", store.backend_name, LOG_LEVEL_NAME)
        yield
        if owns_store:
            store.close()
            logger.info("app_shutdown: content store closed")

    app = FastAPI(
        title="Studio Service",
        description="API for the photography studio site: contact messages, bookings and portfolio.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.store = store

    # Avoid implicit trailing-slash redirects for predictable URLs
    app.router.redirect_slashes = False

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(contacts_router, prefix="/api")
    app.include_router(bookings_router, prefix="/api")
    app.include_router(portfolio_router, prefix="/api")
    app.include_router(users_router, prefix="/api")
    app.include_router(support_router, prefix="/api")
    return app
