"""Enable/disable sync actions from the current URL."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from model.sync_action import SyncAction


def update_sync_button_state(url: str | None, actions: Sequence[SyncAction]) -> None:
    """Enable every action if a URL is present, disable all otherwise.

    Only presence is checked. The URL is not validated.
    """
    enabled = url is not None
    for action in actions:
        action.enabled = enabled
