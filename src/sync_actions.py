"""Factory for the sync actions shown in the settings repository dialog."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Protocol

from constants import (
    MSG_INTERNAL_ERROR,
    MSG_NOT_AUTHORIZED_TITLE,
    MSG_SET_UPSTREAM_FAILED,
    MSG_SET_UPSTREAM_FAILED_TITLE,
    MSG_SYNC_DONE,
    MSG_SYNC_REJECTED_TITLE,
)
from controller.url import normalize_url
from model.sync_action import SyncAction, SyncType
from repository import AuthenticationError, NoRemoteRepositoryError

if TYPE_CHECKING:
    from model.url_field import UrlField
    from repository import GitRepositoryManager

log = logging.getLogger(__name__)

# Button order; the first entry is the default action
SYNC_ORDER = (SyncType.MERGE, SyncType.OVERWRITE_LOCAL, SyncType.OVERWRITE_REMOTE)


class SyncContainer(Protocol):
    """What a sync action needs from the dialog that hosts it.

    run_in_background must deliver on_done/on_error back on the UI thread.
    """

    def run_in_background(
        self,
        work: Callable[[], None],
        on_done: Callable[[], None],
        on_error: Callable[[Exception], None],
    ) -> None: ...

    def notify(self, message: str) -> None: ...

    def show_error(self, title: str, message: str) -> None: ...


@dataclass
class SyncContext:
    """Collaborators shared by all actions of one dialog."""

    repository_manager: GitRepositoryManager


class SyncTask:
    """One attempt at syncing, tracking how far it got."""

    def __init__(
        self,
        sync_type: SyncType,
        url: str | None,
        context: SyncContext,
        container: SyncContainer,
        on_success: Callable[[], None],
    ) -> None:
        self.sync_type = sync_type
        self.url = url
        self._manager = context.repository_manager
        self._container = container
        self._on_success = on_success
        self.repository_will_be_created = not self._manager.is_repository_exists()
        self.upstream_set = False

    def start(self) -> None:
        self._container.run_in_background(self.run, self.done, self.failed)

    def run(self) -> None:
        """Blocking part of the sync. Runs off the UI thread."""
        self._manager.create_repository_if_needed()
        self._manager.set_upstream(self.url)
        self.upstream_set = True
        self._manager.sync(self.sync_type)

    def done(self) -> None:
        log.info(f"Sync {self.sync_type.value} finished")
        self._container.notify(MSG_SYNC_DONE)
        self._on_success()

    def failed(self, error: Exception) -> None:
        if self.repository_will_be_created and not self.upstream_set:
            try:
                self._manager.delete_repository()
            except OSError as e:
                log.error(f"Could not remove settings repository: {e}")

        log.warning(f"Sync {self.sync_type.value} failed: {error}")
        if not self.upstream_set or isinstance(error, NoRemoteRepositoryError):
            self._container.show_error(
                MSG_SET_UPSTREAM_FAILED_TITLE,
                MSG_SET_UPSTREAM_FAILED.format(error=error),
            )
        else:
            title = (
                MSG_NOT_AUTHORIZED_TITLE
                if isinstance(error, AuthenticationError)
                else MSG_SYNC_REJECTED_TITLE
            )
            self._container.show_error(title, str(error) or MSG_INTERNAL_ERROR)


def create_sync_actions(
    context: SyncContext,
    url_field: UrlField,
    container: SyncContainer,
    on_success: Callable[[], None],
) -> list[SyncAction]:
    """Build one action per sync type, Merge first and default.

    Args:
        context: Shared collaborators (repository manager)
        url_field: Field whose text is read when an action runs
        container: Dialog used for background work and user messages
        on_success: Called once the sync has finished successfully
    """

    def make_handler(sync_type: SyncType) -> Callable[[], None]:
        def handler() -> None:
            url = normalize_url(url_field.text)
            # Blank-ness is judged on the raw text; git gets the trimmed URL
            if url is not None:
                url = url.strip()
            SyncTask(sync_type, url, context, container, on_success).start()

        return handler

    return [
        SyncAction(
            sync_type.value,
            sync_type.label,
            make_handler(sync_type),
            default=(i == 0),
        )
        for i, sync_type in enumerate(SYNC_ORDER)
    ]
