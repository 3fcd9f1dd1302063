"""Bookstore API — FastAPI entry point.

Registers middleware, the bookstore router, the domain error handler and
lifecycle hooks. The bookstore router lives under /api/bookstore/.
"""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from core.observability.log_setup import configure_logging, get_logger
from verticals.bookstore.config import config
from verticals.bookstore.errors import BookstoreError

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS", "http://localhost:3000,http://localhost:3001"
).split(",")
DEBUG = os.getenv("DEBUG", "false").lower() == "true"

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown hooks."""
    configure_logging(
        level="DEBUG" if DEBUG else config.logging.level,
        json_format=config.logging.json_format,
        service=config.logging.service,
    )
    logger.info("api_started", version=app.version)
    yield
    logger.info("api_shutting_down")


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Bookstore",
    description="Bookstore inventory: physical, digital and display-only books",
    version="0.1.0",
    lifespan=lifespan,
    debug=DEBUG,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------

from verticals.bookstore.router import (  # noqa: E402
    bookstore_error_handler,
    router as bookstore_router,
    validation_error_handler,
)

app.include_router(bookstore_router, prefix="/api/bookstore", tags=["Bookstore"])
app.add_exception_handler(BookstoreError, bookstore_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)


# ---------------------------------------------------------------------------
# Health & root
# ---------------------------------------------------------------------------

@app.get("/health")
async def health():
    return {"status": "healthy", "version": "0.1.0"}


@app.get("/")
async def root():
    return {
        "name": "Bookstore",
        "version": "0.1.0",
        "docs": "/docs",
    }
