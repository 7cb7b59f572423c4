"""Controller layer: keeps sync actions in step with the URL field.

This package contains:
- url: normalize_url, blank text to None
- enablement: update_sync_button_state for the action list
- session: DialogSession state machine and the DialogHost protocol
"""

from controller.enablement import update_sync_button_state
from controller.session import DialogHost, DialogSession, UpstreamStore
from controller.url import normalize_url

__all__ = [
    "DialogHost",
    "DialogSession",
    "UpstreamStore",
    "normalize_url",
    "update_sync_button_state",
]
