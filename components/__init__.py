"""
UI Components package for the Folder Selector Streamlit app.

This package contains the reusable UI pieces the pages are built from.
"""

from .ui_helpers import print_widget_label, info_box, warning_box, code_span, path_field
from .folder_browser import directory_browser
from .folder_selector import folder_selector_widget

__all__ = [
    'print_widget_label',
    'info_box',
    'warning_box',
    'code_span',
    'path_field',
    'directory_browser',
    'folder_selector_widget',
]
