import logging

from contextlib import asynccontextmanager
from typing import AsyncIterator
from fastapi import FastAPI, Request

from .utils.config import DATABASE_URL, LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

from .db import catalog, ensure_data_dir
from .utils.errors import (
    GameNotFoundError,
    InvalidGameError,
    StorageError,
    StoreUnavailableError,
)
from .utils.response import error_response

from .routers.games import router as games_router
from .routers.search import router as search_router
from .routers.stats import router as stats_router
from .routers.platforms import router as platforms_router
from .routers.franchises import router as franchises_router
from .routers.genres import router as genres_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Open the database file and provision the schema before serving.
    A provisioning failure stops startup; there is no mode without a schema.
    """
    ensure_data_dir(DATABASE_URL)
    logger.info(f"[Startup] Provisioning catalog at {DATABASE_URL}")
    catalog.provision()

    yield

    catalog.dispose()


app = FastAPI(lifespan=lifespan)


@app.exception_handler(GameNotFoundError)
async def not_found_handler(request: Request, exc: GameNotFoundError):
    return error_response(str(exc), status_code=404)


@app.exception_handler(InvalidGameError)
async def invalid_game_handler(request: Request, exc: InvalidGameError):
    return error_response(str(exc), status_code=422)


@app.exception_handler(StoreUnavailableError)
async def unavailable_handler(request: Request, exc: StoreUnavailableError):
    return error_response(str(exc), status_code=503)


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"Storage error on {request.url.path}: {exc}")
    return error_response(str(exc), status_code=500)


app.include_router(games_router)
app.include_router(search_router)
app.include_router(stats_router)
app.include_router(platforms_router)
app.include_router(franchises_router)
app.include_router(genres_router)


@app.get("/health")
def health():
    return {"ok": True, "service": "GameTrc API", "store_available": not catalog.store.poisoned}
