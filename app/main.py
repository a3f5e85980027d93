"""
FastAPI Application - SkyPath Flight Search Service
Loads the flight dataset once at startup and serves searches with up to 2 stops
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core import settings, setup_logging
from .api import api_router
from .services import FlightSearchService
from dataset.ingestion import FlightNetwork, load_network

logger = logging.getLogger(__name__)


def create_app(network: Optional[FlightNetwork] = None) -> FastAPI:
    """
    Build the application. When no network is given, the dataset at
    settings.DATASET_PATH is loaded during startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        loaded = network if network is not None else load_network(settings.DATASET_PATH)
        app.state.network = loaded
        app.state.search_service = FlightSearchService(
            loaded,
            rules=settings.connection_rules(),
            max_stops=settings.MAX_STOPS
        )
        logger.info(
            "%s ready: %d airports, %d flights indexed",
            settings.APP_NAME, len(loaded.airports), len(loaded.index)
        )
        yield

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Flight search API supporting direct and multi-stop (up to 2 stops) itineraries",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API router
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/", tags=["root"])
    async def root():
        """Root endpoint"""
        return {
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs": "/docs",
            "search": f"{settings.API_PREFIX}/flights/search"
        }

    @app.get("/health", tags=["health"])
    async def health():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION
        }

    return app


setup_logging(settings.LOG_LEVEL)

app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
