"""Widget ID constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, DIALOG_TITLE
        self.query_one(css(DIALOG_TITLE), Label)
    """
    return f"#{widget_id}"


def sync_button_id(action_id: str) -> str:
    """Button ID for a sync action."""
    return f"sync-{action_id}-btn"


# Settings dialog
SETTINGS_DIALOG = "settings-dialog"
DIALOG_TITLE = "dialog-title"
URL_ROW = "url-row"
URL_LABEL = "url-label"
URL_INPUT = "url-input"
BROWSE_BTN = "browse-btn"
DIALOG_BUTTONS = "dialog-buttons"
CANCEL_BTN = "cancel-btn"

# Folder chooser
BROWSE_DIALOG = "browse-dialog"
BROWSE_TITLE = "browse-title"
BROWSE_TREE = "browse-tree"
BROWSE_SELECTED = "browse-selected"
BROWSE_BUTTONS = "browse-buttons"
BROWSE_SELECT_BTN = "browse-select-btn"
BROWSE_CANCEL_BTN = "browse-cancel-btn"

# CSS classes
SYNC_ACTION_CLASS = "sync-action-btn"
FIXED_SIZE_CLASS = "fixed-size"
