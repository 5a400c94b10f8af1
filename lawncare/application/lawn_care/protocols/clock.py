"""Protocol for the time source used by the store."""

from datetime import datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Supplies the current time for created records."""

    def now(self) -> datetime:
        """
        Get the current time.

        Returns:
            Timezone-aware current datetime
        """
        ...
