"""
Browse widget that lets the user pick a folder, whatever environment the app runs in.

On a desktop the Browse button opens a modal while the native dialog is shown by a
helper process. In a container the modal holds the in-browser directory browser.
"""

import streamlit as st
from st_modal import Modal

from utils.common import (
    folder_selection_settings,
    get_session_var,
    load_vars,
    pop_session_var,
    set_session_var,
    update_vars,
)
from utils.config import DEFAULT_PROMPT, log
from utils.environment import Environment, current_environment
from utils.folder_selection import select_folder
from utils.native_pickers import UNSUPPORTED_WARNING
from utils.selection import SelectionRequest
from components.folder_browser import directory_browser
from components.ui_helpers import info_box, path_field, warning_box


def apply_result(section, result):
    """
    Store a SelectionResult in the section's session state. Only a confirmed folder
    replaces the current selection; a warning is kept for the next render.
    """
    if result.warning:
        set_session_var(section, "warning", result.warning)
    if result.selected:
        set_session_var(section, "selected_folder", result.path)
        update_vars("general_settings", {"previously_browsed_folder": result.path})
        log(f"Folder selected in section '{section}': {result.path}")


def close_modal(section):
    set_session_var(section, "show_modal", False)


def native_selection_modal(section, prompt, environment, settings):
    """Run the native dialog while the modal tells the user where to look."""
    info_box("Folder selection dialog is open in a separate window. "
             "Please select your folder there to continue (or cancel in that window).")

    request = SelectionRequest(
        prompt=prompt,
        initial_dir=load_vars("general_settings").get("previously_browsed_folder"))
    result = select_folder(request, environment=environment,
                           timeout=settings.get("dialog_timeout_seconds"))
    apply_result(section, result)

    # Always close modal after folder selection attempt
    close_modal(section)
    st.rerun()


def browser_selection_modal(section, prompt, environment, settings):
    """Directory browser confined to the configured browse root."""
    st.markdown(f"#### {prompt}")
    request = SelectionRequest(prompt=prompt, root=settings["browse_root"])

    def on_confirm(browser):
        apply_result(section, select_folder(request, environment=environment, browser=browser))
        close_modal(section)

    directory_browser(section, request.root, show_hidden=settings.get("show_hidden", False),
                      on_confirm=on_confirm, on_cancel=lambda: close_modal(section))


def folder_selector_widget(section="folder_selector", prompt=DEFAULT_PROMPT, environment=None):
    """
    Browse button plus the currently selected folder.

    Args:
        section (str): Session state section that stores the selection
        prompt (str): Text shown in the dialog or above the browser
        environment (Environment, optional): Detected once per process if omitted

    Returns:
        str | None: The selected folder
    """
    if environment is None:
        environment = current_environment()
    settings = folder_selection_settings()
    selected_folder = get_session_var(section, "selected_folder")

    unsupported = environment == Environment.UNSUPPORTED
    if unsupported:
        # Selection stays disabled, the modal can never open
        set_session_var(section, "show_modal", False)

    col1, col2 = st.columns([1, 3])
    with col1:
        if st.button(":material/folder: Browse", key=f"{section}_browse_button", width="stretch",
                     disabled=unsupported):
            pop_session_var(section, "warning")
            set_session_var(section, "show_modal", True)
            st.rerun()
    with col2:
        path_field(selected_folder)

    if unsupported:
        warning_box(UNSUPPORTED_WARNING)

    warning = get_session_var(section, "warning")
    if warning and not unsupported:
        warning_box(warning)

    # modal for folder selection - only create when needed
    if get_session_var(section, "show_modal", False):
        modal = Modal(
            title="#### Folder selection",
            key=f"{section}_modal",
            show_close_button=False,
            show_title=False,
            show_divider=False
        )
        with modal.container():
            if environment == Environment.CONTAINER:
                browser_selection_modal(section, prompt, environment, settings)
            else:
                native_selection_modal(section, prompt, environment, settings)

    return selected_folder
