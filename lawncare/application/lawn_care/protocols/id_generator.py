"""Protocol for entity id generation."""

from typing import Protocol


class IdGeneratorProtocol(Protocol):
    """Hands out entity ids that are unique within the store's lifetime."""

    def new_id(self, prefix: str) -> str:
        """
        Generate a new id.

        Args:
            prefix: Short entity prefix, e.g. "exp" or "inv"

        Returns:
            An id never returned before by this generator
        """
        ...
