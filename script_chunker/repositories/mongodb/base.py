"""Collection access and PyMongo error translation shared by the history repository."""

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from script_chunker.config.logging import get_logger
from script_chunker.resources.mongo.client import get_database

logger = get_logger(__name__)

CHUNKING_STATES_COLLECTION = "chunking_states"


class RepositoryError(Exception):
    """A history store operation failed. The driver exception is kept on .cause, never in the message."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


def _translate_pymongo_error(e: PyMongoError, operation: str) -> RepositoryError:
    logger.warning(
        "History store operation failed",
        extra={"operation": operation, "error_type": type(e).__name__},
    )
    return RepositoryError(f"History store unavailable during {operation}", cause=e)


def chunking_states_collection() -> AsyncIOMotorCollection:
    """Saved chunking states, one document per state_id."""
    return get_database()[CHUNKING_STATES_COLLECTION]


def state_filter(state_id: str) -> dict[str, str]:
    return {"state_id": state_id}
