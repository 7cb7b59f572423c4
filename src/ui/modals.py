"""Modal dialogs: the settings repository dialog and its folder chooser."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.screen import ModalScreen
from textual.widgets import Button, DirectoryTree, Input, Label, Static

from controller.session import ActionFactory, DialogSession, UpstreamStore
from model.sync_action import SyncAction
from ui.ids import css, sync_button_id
from ui.widgets import FilteredDirectoryTree, UrlFieldWithBrowse
import ui.ids as ids

log = logging.getLogger(__name__)


class SettingsRepositoryModal(ModalScreen[bool]):
    """Dialog for setting the upstream URL and running a sync.

    Acts as the DialogHost for a DialogSession and as the container the
    sync actions use for background work and messages. Dismisses with
    True when a sync succeeded and False when cancelled.
    """

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(
        self,
        upstream_store: UpstreamStore,
        action_factory: ActionFactory,
        context: Any = None,
    ) -> None:
        super().__init__()
        self.dialog_title = ""
        self.resizable = True
        self._busy = False
        self.session = DialogSession(self, upstream_store, action_factory, context)
        self._actions_by_button = {
            sync_button_id(action.id): action for action in self.session.get_actions()
        }
        for action in self.session.get_actions():
            action.add_listener(self._on_action_enabled_changed)

    def compose(self) -> ComposeResult:
        url_field = self.session.get_center_content()
        classes = "" if self.resizable else ids.FIXED_SIZE_CLASS
        with Vertical(id=ids.SETTINGS_DIALOG, classes=classes):
            yield Label(self.dialog_title, id=ids.DIALOG_TITLE)
            yield UrlFieldWithBrowse(url_field.text, id=ids.URL_ROW)
            with Horizontal(id=ids.DIALOG_BUTTONS):
                for action in self.session.get_actions():
                    yield Button(
                        action.label,
                        id=sync_button_id(action.id),
                        classes=ids.SYNC_ACTION_CLASS,
                        variant="primary" if action.default else "default",
                        disabled=not action.enabled,
                    )
                yield Button("Cancel", id=ids.CANCEL_BTN, variant="error")

    def on_mount(self) -> None:
        self.call_after_refresh(self._apply_preferred_focus)

    def _apply_preferred_focus(self) -> None:
        if self.session.get_preferred_focus().focus_requested:
            self.query_one(css(ids.URL_INPUT), Input).focus()

    # =========================================================================
    # DialogHost
    # =========================================================================

    def set_title(self, title: str) -> None:
        self.dialog_title = title
        if not self.is_mounted:
            return
        try:
            self.query_one(css(ids.DIALOG_TITLE), Label).update(title)
        except NoMatches:
            log.debug("dialog title label not found")

    def set_resizable(self, resizable: bool) -> None:
        self.resizable = resizable

    def get_actions(self) -> tuple[SyncAction, ...]:
        return self.session.get_actions()

    def get_center_content(self) -> Any:
        return self.session.get_center_content()

    def get_preferred_focus(self) -> Any:
        return self.session.get_preferred_focus()

    def accept(self) -> None:
        self.dismiss(True)

    def cancel(self) -> None:
        self.dismiss(False)

    # =========================================================================
    # SyncContainer
    # =========================================================================

    def run_in_background(
        self,
        work: Callable[[], None],
        on_done: Callable[[], None],
        on_error: Callable[[Exception], None],
    ) -> None:
        """Run work in a thread worker, reporting back on the UI thread."""
        self._set_busy(True)

        def run() -> None:
            try:
                work()
            except Exception as e:
                log.debug("Background sync raised", exc_info=True)
                self.app.call_from_thread(self._finish_background, on_error, e)
            else:
                self.app.call_from_thread(self._finish_background, on_done)

        self.run_worker(run, thread=True, exclusive=True, group="sync")

    def _finish_background(self, callback: Callable, *args: Any) -> None:
        self._set_busy(False)
        callback(*args)

    def notify(self, message: str, **kwargs: Any) -> None:
        self.app.notify(message, **kwargs)

    def show_error(self, title: str, message: str) -> None:
        self.app.notify(message, title=title, severity="error")

    # =========================================================================
    # Button state
    # =========================================================================

    def _set_busy(self, busy: bool) -> None:
        self._busy = busy
        self._refresh_action_buttons()

    def _on_action_enabled_changed(self, action: SyncAction, enabled: bool) -> None:
        self._refresh_action_buttons()

    def _refresh_action_buttons(self) -> None:
        if not self.is_mounted:
            return
        for button_id, action in self._actions_by_button.items():
            try:
                button = self.query_one(css(button_id), Button)
            except NoMatches:
                log.debug(f"{button_id} not found")
                continue
            button.disabled = self._busy or not action.enabled

    # =========================================================================
    # Events
    # =========================================================================

    @on(Input.Changed, css(ids.URL_INPUT))
    def on_url_changed(self, event: Input.Changed) -> None:
        self.session.url_field.set_text(event.value)

    @on(Input.Submitted, css(ids.URL_INPUT))
    def on_url_submitted(self, event: Input.Submitted) -> None:
        """Enter in the URL field runs the default action."""
        for action in self.session.get_actions():
            if action.default:
                self._invoke(action)
                return

    @on(Button.Pressed, f".{ids.SYNC_ACTION_CLASS}")
    def on_sync_pressed(self, event: Button.Pressed) -> None:
        action = self._actions_by_button.get(event.button.id or "")
        if action is not None:
            self._invoke(action)

    def _invoke(self, action: SyncAction) -> None:
        if self._busy:
            log.debug(f"Sync already running, ignoring {action.id}")
            return
        action.invoke()

    @on(Button.Pressed, css(ids.CANCEL_BTN))
    def on_cancel_pressed(self, event: Button.Pressed) -> None:
        self.session.cancel()

    def action_cancel(self) -> None:
        self.session.cancel()


class BrowseFolderModal(ModalScreen[Path | None]):
    """Modal for choosing a local folder to use as the repository URL."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, start_path: Path) -> None:
        super().__init__()
        self.start_path = start_path
        self.selected: Path | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id=ids.BROWSE_DIALOG):
            yield Label("Select Folder", id=ids.BROWSE_TITLE)
            yield FilteredDirectoryTree(self.start_path, id=ids.BROWSE_TREE)
            yield Static("", id=ids.BROWSE_SELECTED)
            with Horizontal(id=ids.BROWSE_BUTTONS):
                yield Button("Cancel", id=ids.BROWSE_CANCEL_BTN, variant="default")
                yield Button("Select", id=ids.BROWSE_SELECT_BTN, variant="success", disabled=True)

    def on_mount(self) -> None:
        self.query_one(css(ids.BROWSE_TREE), FilteredDirectoryTree).focus()

    @on(DirectoryTree.DirectorySelected)
    def on_directory_selected(self, event: DirectoryTree.DirectorySelected) -> None:
        self.selected = Path(event.path)
        self.query_one(css(ids.BROWSE_SELECTED), Static).update(str(self.selected))
        self.query_one(css(ids.BROWSE_SELECT_BTN), Button).disabled = False

    def action_cancel(self) -> None:
        self.dismiss(None)

    @on(Button.Pressed, css(ids.BROWSE_CANCEL_BTN))
    def on_cancel(self, event: Button.Pressed) -> None:
        self.dismiss(None)

    @on(Button.Pressed, css(ids.BROWSE_SELECT_BTN))
    def on_select(self, event: Button.Pressed) -> None:
        if self.selected is not None:
            self.dismiss(self.selected)
