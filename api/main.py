from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

import asyncpg
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from banners import router as banners_router
from categories import router as categories_router
from core import db, schema
from core.errors import RepositoryError
from partners import router as partners_router
from promotions import router as promotions_router

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    level = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def listen_address() -> tuple[str, int]:
    """
    Parse LISTEN as "host:port". A bare ":8080" binds every interface.
    """
    raw = os.environ.get("LISTEN", "").strip() or ":8080"
    host, _, port = raw.rpartition(":")
    return host or "0.0.0.0", int(port)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # One pool per process; the schema must exist before any request is served.
    pool = await db.create_pool()
    try:
        await schema.init_schema(pool)
        app.state.pool = pool
        yield
    finally:
        app.state.pool = None
        await pool.close()


app = FastAPI(lifespan=lifespan)

if cors_origins():
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_methods=["GET"],
        allow_headers=["*"],
    )

app.include_router(categories_router.router, tags=["categories"])
app.include_router(partners_router.router, tags=["partners"])
app.include_router(banners_router.router, tags=["banners"])
app.include_router(promotions_router.router, tags=["promotions"])


@app.exception_handler(RepositoryError)
async def repository_error_handler(request: Request, exc: RepositoryError) -> PlainTextResponse:
    logger.warning(
        "repository_error operation=%s path=%s error=%s",
        exc.operation,
        request.url.path,
        exc,
    )
    return PlainTextResponse(str(exc), status_code=500)


@app.get("/healthcheck", response_class=PlainTextResponse)
async def healthcheck(pool: asyncpg.Pool = Depends(db.get_pool)) -> PlainTextResponse:
    try:
        await db.ping(pool)
    except Exception as exc:
        logger.warning("healthcheck_failed error=%s", exc)
        return PlainTextResponse(str(exc) or type(exc).__name__, status_code=500)
    return PlainTextResponse("ok")


if __name__ == "__main__":
    host, port = listen_address()
    uvicorn.run(app, host=host, port=port)
