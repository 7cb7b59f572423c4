"""UI module containing the dialog screens, widgets, and styles."""

from ui.modals import BrowseFolderModal, SettingsRepositoryModal
from ui.widgets import FilteredDirectoryTree, UrlFieldWithBrowse, browse_start_path
from ui import ids

__all__ = [
    "BrowseFolderModal",
    "FilteredDirectoryTree",
    "SettingsRepositoryModal",
    "UrlFieldWithBrowse",
    "browse_start_path",
    "ids",
]
