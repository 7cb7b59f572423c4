"""Widgets for the settings repository dialog."""

from __future__ import annotations

import logging
from pathlib import Path

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, DirectoryTree, Input, Label

import ui.ids as ids

log = logging.getLogger(__name__)


class FilteredDirectoryTree(DirectoryTree):
    """A directory tree that only shows directories."""

    def filter_paths(self, paths: list[Path]) -> list[Path]:
        return [p for p in paths if p.is_dir()]


def browse_start_path(text: str) -> Path:
    """Folder the chooser opens at: the typed path if it is a directory, else home."""
    candidate = Path(text.strip()).expanduser() if text.strip() else None
    if candidate is not None and candidate.is_dir():
        return candidate.resolve()
    return Path.home()


class UrlFieldWithBrowse(Horizontal):
    """URL input with a button that picks a local folder instead."""

    def __init__(self, initial_text: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self._initial_text = initial_text

    def compose(self) -> ComposeResult:
        yield Label("URL:", id=ids.URL_LABEL)
        yield Input(
            value=self._initial_text,
            placeholder="https://example.com/settings.git or a local folder",
            id=ids.URL_INPUT,
        )
        yield Button("...", id=ids.BROWSE_BTN, variant="default")

    @property
    def input(self) -> Input:
        return self.query_one(ids.css(ids.URL_INPUT), Input)

    @on(Button.Pressed, ids.css(ids.BROWSE_BTN))
    def on_browse_pressed(self, event: Button.Pressed) -> None:
        from ui.modals import BrowseFolderModal

        event.stop()
        start = browse_start_path(self.input.value)
        self.app.push_screen(BrowseFolderModal(start), self._on_folder_chosen)

    def _on_folder_chosen(self, path: Path | None) -> None:
        if path is None:
            return
        log.debug(f"Folder chosen: {path}")
        # Assigning the value fires Input.Changed, which the dialog forwards
        self.input.value = str(path)
