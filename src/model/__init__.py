"""Model classes for setrepo."""

from model.session_state import SessionState
from model.sync_action import SYNC_TYPE_LABELS, SyncAction, SyncType
from model.url_field import UrlField

__all__ = [
    "SessionState",
    "SYNC_TYPE_LABELS",
    "SyncAction",
    "SyncType",
    "UrlField",
]
