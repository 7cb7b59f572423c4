"""URL text field model with an explicit text-change event stream."""

from __future__ import annotations

import logging
from typing import Callable

log = logging.getLogger(__name__)

TextChangeHandler = Callable[[str], None]


class UrlField:
    """The repository URL as typed by the user.

    The field is UI-toolkit agnostic: widgets push edits in through
    set_text(), and interested parties subscribe with on_text_change().
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._handlers: list[TextChangeHandler] = []
        self.focus_requested = False

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        """Replace the field text, notifying subscribers if it changed."""
        if text == self._text:
            return
        self._text = text
        for handler in list(self._handlers):
            handler(text)

    def on_text_change(self, handler: TextChangeHandler) -> None:
        """Subscribe to text changes. Handlers receive the new raw text."""
        self._handlers.append(handler)

    def request_focus(self) -> None:
        log.debug("URL field requested focus")
        self.focus_requested = True

    def __repr__(self) -> str:
        return f"UrlField(text={self._text!r})"
