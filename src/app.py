"""Main TUI application for setrepo."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from textual.app import App

from constants import APP_NAME, DIALOG_TITLE, SETREPO_VERSION
from controller.session import ActionFactory
from repository import GitRepositoryManager
from sync_actions import SyncContext, create_sync_actions
from ui.modals import SettingsRepositoryModal

log = logging.getLogger(__name__)

# Load CSS from file
APP_CSS = (Path(__file__).parent / "ui" / "styles.css").read_text()


def _get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / APP_NAME
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / f"{APP_NAME}.log"


def setup_logging(level: str = "DEBUG") -> None:
    """Send log output to the XDG state directory (the terminal belongs to the TUI)."""
    logging.basicConfig(
        filename=str(_get_log_path()),
        level=getattr(logging, level.upper(), logging.DEBUG),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


class SettingsRepositoryApp(App[bool]):
    """Shows the settings repository dialog and exits with its outcome."""

    TITLE = DIALOG_TITLE
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    def __init__(
        self,
        repository_manager: GitRepositoryManager,
        action_factory: ActionFactory = create_sync_actions,
        version: str = SETREPO_VERSION,
    ) -> None:
        super().__init__()
        self.repository_manager = repository_manager
        self.version = version
        self._action_factory = action_factory
        self.dialog: SettingsRepositoryModal | None = None

    def on_mount(self) -> None:
        log.info(f"{APP_NAME} {self.version} started, repository={self.repository_manager.repository_dir}")
        self.dialog = SettingsRepositoryModal(
            upstream_store=self.repository_manager,
            action_factory=self._action_factory,
            context=SyncContext(self.repository_manager),
        )
        self.push_screen(self.dialog, callback=self._on_dialog_closed)

    def _on_dialog_closed(self, accepted: bool | None) -> None:
        log.info(f"Dialog closed, accepted={bool(accepted)}")
        self.exit(bool(accepted))
