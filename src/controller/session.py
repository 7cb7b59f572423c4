"""DialogSession: state machine behind the settings repository dialog."""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol, Sequence

from constants import DIALOG_TITLE
from controller.enablement import update_sync_button_state
from controller.url import normalize_url
from model.session_state import SessionState
from model.sync_action import SyncAction
from model.url_field import UrlField

log = logging.getLogger(__name__)


class DialogHost(Protocol):
    """Window capabilities the session needs from whatever renders it.

    set_title, set_resizable, accept and cancel are provided by the host.
    get_actions, get_center_content and get_preferred_focus are answered by
    the session and pulled by the host when it builds the window.
    """

    def set_title(self, title: str) -> None: ...

    def set_resizable(self, resizable: bool) -> None: ...

    def get_actions(self) -> Sequence[SyncAction]: ...

    def get_center_content(self) -> Any: ...

    def get_preferred_focus(self) -> Any: ...

    def accept(self) -> None: ...

    def cancel(self) -> None: ...


class UpstreamStore(Protocol):
    """Source of the initially displayed repository URL."""

    def get_upstream(self) -> str | None: ...


ActionFactory = Callable[[Any, UrlField, Any, Callable[[], None]], Sequence[SyncAction]]


class DialogSession:
    """Owns the URL field and sync actions for one opening of the dialog.

    The session keeps action enablement in step with the URL field and
    closes exactly once, either accepted (a sync action succeeded) or
    cancelled (the user dismissed the dialog).
    """

    def __init__(
        self,
        host: DialogHost,
        upstream_store: UpstreamStore,
        action_factory: ActionFactory,
        context: Any = None,
    ) -> None:
        self._host = host
        self.state = SessionState.OPEN
        self.url_field = UrlField(upstream_store.get_upstream() or "")
        self._actions: tuple[SyncAction, ...] = tuple(
            action_factory(context, self.url_field, host, self.complete)
        )
        self.url_field.on_text_change(self._on_text_change)
        self._update_actions()
        self.url_field.request_focus()

        host.set_title(DIALOG_TITLE)
        host.set_resizable(False)
        log.info(f"Dialog session opened with {len(self._actions)} action(s), url={self.url!r}")

    @property
    def url(self) -> str | None:
        """Current normalized repository URL."""
        return normalize_url(self.url_field.text)

    @property
    def actions(self) -> tuple[SyncAction, ...]:
        return self._actions

    def get_actions(self) -> tuple[SyncAction, ...]:
        return self._actions

    def get_center_content(self) -> UrlField:
        return self.url_field

    def get_preferred_focus(self) -> UrlField:
        return self.url_field

    def _update_actions(self) -> None:
        update_sync_button_state(self.url, self._actions)

    def _on_text_change(self, text: str) -> None:
        if self.state.is_closed:
            log.debug("Ignoring text change on closed session")
            return
        self._update_actions()

    def complete(self) -> None:
        """Completion callback for a successful sync: close as accepted."""
        if self.state.is_closed:
            log.debug(f"Ignoring completion, session already {self.state.value}")
            return
        self.state = SessionState.ACCEPTED
        log.info("Dialog session accepted")
        self._host.accept()

    def cancel(self) -> None:
        """Close the session because the user dismissed the dialog."""
        if self.state.is_closed:
            log.debug(f"Ignoring cancel, session already {self.state.value}")
            return
        self.state = SessionState.CANCELLED
        log.info("Dialog session cancelled")
        self._host.cancel()
