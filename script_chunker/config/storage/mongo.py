"""MongoDB connection config for the history store (read from settings). Read-only; no business logic."""

from typing import TypedDict

from script_chunker.config.settings import get_settings


class MongoConfig(TypedDict):
    uri: str
    database: str
    connect_timeout_ms: int
    server_selection_timeout_ms: int
    max_pool_size: int


def get_mongo_config() -> MongoConfig:
    """Return MongoDB connection parameters from settings for use by resources."""
    s = get_settings()
    return MongoConfig(
        uri=s.mongo_uri,
        database=s.mongo_database,
        connect_timeout_ms=s.mongo_connect_timeout_ms,
        server_selection_timeout_ms=s.mongo_server_selection_timeout_ms,
        max_pool_size=s.mongo_max_pool_size,
    )
