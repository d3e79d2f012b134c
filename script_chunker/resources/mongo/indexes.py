"""MongoDB index creation for the history collection. Called once at startup."""

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from script_chunker.config.logging import get_logger
from script_chunker.repositories.mongodb.base import CHUNKING_STATES_COLLECTION

logger = get_logger(__name__)


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create the indexes used by history lookups (by id, newest first, by name)."""
    try:
        states = db[CHUNKING_STATES_COLLECTION]
        await states.create_index([("state_id", ASCENDING)], unique=True)
        await states.create_index([("timestamp", DESCENDING)])
        await states.create_index([("name", ASCENDING)])
        logger.info("Created indexes for chunking_states collection")
    except PyMongoError as e:
        logger.error("Failed to create MongoDB indexes", extra={"error": str(e), "error_type": type(e).__name__})
        raise
