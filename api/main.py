"""FastAPI application for the round stats API."""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import Settings, get_settings
from database.connection import db
from database.db_manager import DatabaseManager
from database.exceptions import DataFetchError, NotFoundError

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO", debug: bool = False) -> None:
    """Configure root logging to stdout."""
    logging.basicConfig(
        level=logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize DB pool on startup, close on shutdown."""
    settings: Settings = app.state.settings
    await db.initialize(
        dsn=settings.database_url,
        min_size=settings.db_min_pool_size,
        max_size=settings.db_max_pool_size,
    )
    app.state.db_manager = DatabaseManager(db.pool)
    yield
    await db.close()


async def data_fetch_error_handler(request: Request, exc: DataFetchError):
    logger.warning("Data fetch failed for %s: %s", request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": "Stats data is unavailable"})


async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning("Not found on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=404, content={"detail": str(exc)})


def create_app(settings: Optional[Settings] = None, *, use_lifespan: bool = True) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.debug)

    app = FastAPI(
        title="Golf Round Stats API",
        version="1.0.0",
        lifespan=lifespan if use_lifespan else None,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(DataFetchError, data_fetch_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)

    from api.routers import rounds, stats
    app.include_router(rounds.router, prefix="/api/rounds", tags=["rounds"])
    app.include_router(stats.router, prefix="/api/stats", tags=["stats"])

    @app.get("/api/health")
    async def health():
        healthy = await db.health_check()
        return {"status": "ok" if healthy else "degraded", "database": healthy}

    return app


app = create_app()
