"""Sync action model."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable

log = logging.getLogger(__name__)

EnabledListener = Callable[["SyncAction", bool], None]


class SyncType(Enum):
    """Kinds of synchronization against the remote repository."""

    MERGE = "merge"
    OVERWRITE_LOCAL = "overwrite-local"  # reset to theirs
    OVERWRITE_REMOTE = "overwrite-remote"  # reset to mine

    @property
    def label(self) -> str:
        return SYNC_TYPE_LABELS[self]


SYNC_TYPE_LABELS = {
    SyncType.MERGE: "Merge",
    SyncType.OVERWRITE_LOCAL: "Overwrite Local",
    SyncType.OVERWRITE_REMOTE: "Overwrite Remote",
}


class SyncAction:
    """A user-invocable command rendered as a dialog button.

    The enabled flag is owned by whoever drives the dialog; the invoke
    behavior belongs to the code that built the action.
    """

    def __init__(
        self,
        action_id: str,
        label: str,
        handler: Callable[[], None],
        default: bool = False,
    ) -> None:
        self.id = action_id
        self.label = label
        self.default = default
        self._handler = handler
        self._enabled = True
        self._listeners: list[EnabledListener] = []

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        value = bool(value)
        if value == self._enabled:
            return
        self._enabled = value
        for listener in list(self._listeners):
            listener(self, value)

    def add_listener(self, listener: EnabledListener) -> None:
        """Register a callback fired when the enabled flag changes."""
        self._listeners.append(listener)

    def invoke(self) -> bool:
        """Run the action. Returns False if the action is disabled."""
        if not self._enabled:
            log.debug(f"Ignoring invoke of disabled action {self.id}")
            return False
        log.info(f"Invoking sync action {self.id}")
        self._handler()
        return True

    def __repr__(self) -> str:
        flag = "enabled" if self._enabled else "disabled"
        return f"SyncAction({self.id!r}, {flag})"
