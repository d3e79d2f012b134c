"""Id generation for saved chunking states."""

import uuid


def generate_uuid_prefix(prefix: str) -> str:
    """Generate a unique id with prefix, e.g. state_<uuid>."""
    return f"{prefix}_{uuid.uuid4().hex[:24]}"


def generate_state_id() -> str:
    """Generate a unique state_id for a history record."""
    return generate_uuid_prefix("state")
