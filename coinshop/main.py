"""Coin Shop API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CoinShopError -> structured JSON responses
    - Database engine created on startup and disposed on shutdown (lifespan)
    - Every request logged with method, path, status and duration
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from coinshop.api.error_handlers import register_error_handlers
from coinshop.api.routes import auth, health, info, purchases, transfers
from coinshop.config import get_settings
from coinshop.infrastructure.database import close_db, init_db
from coinshop.infrastructure.observability import (
    RequestLoggingMiddleware, setup_logging,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Coin Shop API started")
    yield
    await close_db()
    logger.info("Coin Shop API shut down")


app = FastAPI(title="Coin Shop API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(info.router)
app.include_router(transfers.router)
app.include_router(purchases.router)

register_error_handlers(app)
