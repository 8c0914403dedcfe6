"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from filmes_api import __version__
from filmes_api.api.errors import register_exception_handlers
from filmes_api.api.routes import addresses, cinemas, health, movies, showings
from filmes_api.config import settings
from filmes_api.database import create_tables, engine

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: make sure the schema exists
    if settings.create_tables_on_startup:
        await create_tables()
        logger.info("Database tables ensured")

    yield

    # Shutdown: release pooled connections
    await engine.dispose()
    logger.info("Database engine disposed")


# Create FastAPI app
app = FastAPI(
    title="FilmesApi",
    description="CRUD API for movies, cinemas and their showings",
    version=__version__,
    lifespan=lifespan,
)

register_exception_handlers(app)

# Include routers
app.include_router(health.router)
app.include_router(movies.router, tags=["filmes"])
app.include_router(cinemas.router, tags=["cinemas"])
app.include_router(addresses.router, tags=["enderecos"])
app.include_router(showings.router, tags=["sessoes"])


def run() -> None:
    """Serve the API with uvicorn using the configured host and port."""
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
