"""FastAPI app: routers, lifespan (logging, indexes, history helpers), probes and error translation."""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from script_chunker.config.logging import configure_logging, get_logger
from script_chunker.config.settings import get_settings
from script_chunker.controllers.routes.chunk import router as chunk_router
from script_chunker.controllers.routes.documents import router as documents_router
from script_chunker.controllers.routes.history import router as history_router
from script_chunker.controllers.schema.chunk import OversizedContentDetail
from script_chunker.repositories.mongodb.base import RepositoryError
from script_chunker.resources.mongo.client import close_mongo_client, get_database
from script_chunker.resources.mongo.health import ping_mongo
from script_chunker.resources.mongo.indexes import create_indexes
from script_chunker.services.chunking.errors import InvalidConfiguration, OversizedUnboundedContent
from script_chunker.services.history.autosave import AutoSaver
from script_chunker.services.history.cache import HistoryCache

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: logging, indexes, history helpers. Shutdown: cancel pending auto-save, close MongoDB."""
    settings = get_settings()
    configure_logging()
    logger.info("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})
    try:
        await create_indexes(get_database())
    except PyMongoError as e:
        # Chunking does not need the history store; keep serving
        logger.error("History indexes not created", extra={"error_type": type(e).__name__})
    app.state.history_cache = HistoryCache()
    app.state.autosaver = AutoSaver(on_saved=app.state.history_cache.invalidate)
    yield
    logger.info("Application shutting down")
    await app.state.autosaver.aclose()
    close_mongo_client()


app = FastAPI(
    title="Script Chunker",
    description="Split long scripts into sentence-respecting chunks under a character limit",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(chunk_router)
app.include_router(documents_router)
app.include_router(history_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness only; never touches MongoDB."""
    return {"status": "ok"}


@app.get("/ready")
async def ready() -> JSONResponse:
    """Readiness of the history store. Chunking endpoints work even when this reports degraded."""
    mongo = await ping_mongo()
    ok = bool(mongo.get("ok"))
    body = {"status": "ok" if ok else "degraded", "mongo": mongo}
    return JSONResponse(content=body, status_code=200 if ok else 503)


@app.exception_handler(InvalidConfiguration)
async def invalid_configuration_handler(_request: Request, exc: InvalidConfiguration):
    return JSONResponse(content={"detail": str(exc)}, status_code=400)


@app.exception_handler(OversizedUnboundedContent)
async def oversized_content_handler(_request: Request, exc: OversizedUnboundedContent):
    logger.info("Rejected unbounded content", extra={"length": exc.length, "limit": exc.limit})
    body = OversizedContentDetail(detail=str(exc), length=exc.length, limit=exc.limit, preview=exc.preview)
    return JSONResponse(content=body.model_dump(), status_code=422)


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Storage failures become 503, anything else 500. Internal details never reach the client."""
    if isinstance(exc, (RepositoryError, PyMongoError)):
        logger.warning("History store unavailable", extra={"error_type": type(exc).__name__})
        return JSONResponse(
            content={"detail": "Storage temporarily unavailable. Please retry later."},
            status_code=503,
        )
    logger.exception("Unhandled error")
    return JSONResponse(content={"detail": "An internal error occurred."}, status_code=500)


def run() -> None:
    """Console entry point: serve the app with uvicorn using host/port from settings."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
