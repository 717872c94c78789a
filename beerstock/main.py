"""FastAPI application entry point for BeerStock."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from beerstock import __version__
from beerstock.config import settings
from beerstock.database import close_db, init_db
from beerstock.exceptions import BeerStockError
from beerstock.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    configure_logging()

    await init_db()
    logger.info("%s %s started", settings.app_name, __version__)

    yield

    await close_db()
    logger.info("%s stopped", settings.app_name)


async def beer_stock_error_handler(request: Request, exc: BeerStockError) -> JSONResponse:
    """Answer a rejected stock operation with its status and message."""
    logger.debug("%s %s rejected: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


app = FastAPI(
    title=settings.app_name,
    description="Beer stock management API",
    version=__version__,
    lifespan=lifespan,
)

app.add_exception_handler(BeerStockError, beer_stock_error_handler)

# Only allow origins from the whitelist; empty list means same-origin only
if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Content-Type"],
        max_age=600,  # Cache preflight for 10 minutes
    )


# Health check endpoint
@app.get("/health", tags=["Health"])
async def health_check() -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse(
        content={
            "status": "healthy",
            "version": __version__,
            "app_name": settings.app_name,
        }
    )


# Import and include routers
from beerstock.routers import beers

app.include_router(beers.router, prefix="/api/v1/beers", tags=["Beers"])
