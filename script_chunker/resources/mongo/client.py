"""Shared Motor client for the history store. Created lazily, closed on app shutdown."""

from typing import Any

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from script_chunker.config.logging import get_logger
from script_chunker.config.storage.mongo import MongoConfig, get_mongo_config

logger = get_logger(__name__)

_client: AsyncIOMotorClient | None = None


def _client_options(cfg: MongoConfig) -> dict[str, Any]:
    # tz_aware so stored state timestamps come back as aware UTC datetimes
    return {
        "connectTimeoutMS": cfg["connect_timeout_ms"],
        "serverSelectionTimeoutMS": cfg["server_selection_timeout_ms"],
        "maxPoolSize": cfg["max_pool_size"],
        "tz_aware": True,
    }


def get_mongo_client() -> AsyncIOMotorClient:
    global _client
    if _client is None:
        cfg = get_mongo_config()
        _client = AsyncIOMotorClient(cfg["uri"], **_client_options(cfg))
        logger.info("Connected history store client", extra={"database": cfg["database"]})
    return _client


def get_database() -> AsyncIOMotorDatabase:
    """History database named by settings.mongo_database."""
    return get_mongo_client()[get_mongo_config()["database"]]


def close_mongo_client() -> None:
    """Release pooled connections. Safe to call when no client was created."""
    global _client
    if _client is None:
        return
    _client.close()
    _client = None
    logger.info("Closed history store client")
