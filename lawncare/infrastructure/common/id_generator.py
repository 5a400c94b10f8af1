"""Id generator adapter."""

from uuid import uuid4


class UuidIdGenerator:
    """Generates ids of the form "<prefix>-<uuid4 hex>"."""

    def new_id(self, prefix: str) -> str:
        return f"{prefix}-{uuid4().hex}"
