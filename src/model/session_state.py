"""Dialog session lifecycle states."""

from enum import Enum


class SessionState(Enum):
    OPEN = "open"
    ACCEPTED = "accepted"
    CANCELLED = "cancelled"

    @property
    def is_closed(self) -> bool:
        return self is not SessionState.OPEN
