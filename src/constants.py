"""Shared constants for setrepo."""

APP_NAME = "setrepo"
SETREPO_VERSION = "0.1.0"

DIALOG_TITLE = "Settings Repository"

DEFAULT_REMOTE_NAME = "origin"
DEFAULT_BRANCH = "master"
DEFAULT_LOG_LEVEL = "DEBUG"

# User-facing messages
MSG_SYNC_DONE = "Settings synced"
MSG_SET_UPSTREAM_FAILED_TITLE = "Cannot set upstream"
MSG_SET_UPSTREAM_FAILED = "Cannot set upstream: {error}"
MSG_NOT_AUTHORIZED_TITLE = "Not authorized"
MSG_SYNC_REJECTED_TITLE = "Sync rejected"
MSG_INTERNAL_ERROR = "Internal error"
