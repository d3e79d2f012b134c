"""MongoDB reachability check backing the /ready probe."""

import time
from typing import Any

from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from script_chunker.config.logging import get_logger
from script_chunker.resources.mongo.client import get_mongo_client

logger = get_logger(__name__)


async def ping_mongo() -> dict[str, Any]:
    """
    Send a ping to the history store. Returns {"ok": True, "latency_ms": ...} on
    success, else {"ok": False, "error": <short code>}; driver messages are not exposed.
    """
    started = time.perf_counter()
    try:
        await get_mongo_client().admin.command("ping")
    except ServerSelectionTimeoutError:
        logger.warning("History store unreachable", extra={"error": "connection_timeout"})
        return {"ok": False, "error": "connection_timeout"}
    except PyMongoError as e:
        logger.warning("History store ping failed", extra={"error_type": type(e).__name__})
        return {"ok": False, "error": "connection_failed"}
    return {"ok": True, "latency_ms": round((time.perf_counter() - started) * 1000, 1)}
