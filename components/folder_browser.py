"""
In-browser directory browser, shown when the app runs without a display server.

Rendered as a Streamlit fragment: opening a subfolder or going up only reruns this
fragment, so the rest of the page keeps its state and does not flicker. Confirming
or cancelling triggers a full app rerun so the page picks up the outcome.
"""

import os

import streamlit as st

from utils.browse_state import BrowseState
from utils.common import get_session_var, logged_callback, pop_session_var, set_session_var
from components.ui_helpers import code_span, warning_box


def get_browser(section, root, show_hidden=False):
    """
    The section's BrowseState, created on first use. A changed root or hidden
    folder setting starts a new one.
    """
    browser = get_session_var(section, "browse_state")
    root = os.path.realpath(os.path.abspath(root))
    if browser is None or browser.root != root or browser.show_hidden != show_hidden:
        browser = BrowseState(root, show_hidden=show_hidden)
        set_session_var(section, "browse_state", browser)
        set_session_var(section, "browse_nav_count", 0)
    return browser


def discard_browser(section):
    pop_session_var(section, "browse_state")
    pop_session_var(section, "browse_nav_count")


@logged_callback
def on_browse_choice(section, browser, key):
    name = st.session_state.get(key)
    if name is None:
        return
    browser.navigate(name)
    # New widget key per move so the chooser starts empty in the next folder
    set_session_var(section, "browse_nav_count", get_session_var(section, "browse_nav_count", 0) + 1)


def confirm_browser(section, browser, on_confirm=None):
    """Confirm the current folder, hand the state to on_confirm, then drop it."""
    result = browser.confirm()
    if on_confirm is not None:
        on_confirm(browser)
    discard_browser(section)
    return result


def cancel_browser(section, on_cancel=None):
    discard_browser(section)
    if on_cancel is not None:
        on_cancel()


@st.fragment
def directory_browser(section, root, show_hidden=False, on_confirm=None, on_cancel=None):
    """
    Render the directory browser for one session section.

    Args:
        section (str): Session state section holding the BrowseState
        root (str): Permitted root, configured by the app
        show_hidden (bool): List folders whose name starts with a dot
        on_confirm (callable, optional): Called with the BrowseState after confirm()
        on_cancel (callable, optional): Called when the user closes the browser
    """
    browser = get_browser(section, root, show_hidden)

    st.markdown(f":material/folder_open: &nbsp; {code_span(browser.current)}", unsafe_allow_html=True)

    if browser.notice:
        warning_box(browser.notice)

    key = f"{section}_browse_choice_{get_session_var(section, 'browse_nav_count', 0)}"
    st.selectbox(
        "Open folder",
        options=browser.options(),
        index=None,
        placeholder="Choose a subfolder..." if browser.subdirs else "No subfolders",
        format_func=lambda name: ":material/arrow_upward: Up one level" if name == ".." else name,
        key=key,
        on_change=on_browse_choice,
        args=(section, browser, key),
        label_visibility="collapsed",
    )

    col1, col2 = st.columns(2)
    with col1:
        if st.button(":material/close: Cancel", key=f"{section}_browse_cancel", width="stretch"):
            cancel_browser(section, on_cancel)
            st.rerun()
    with col2:
        if st.button(":material/check: Select this folder", key=f"{section}_browse_confirm",
                     type="primary", width="stretch", disabled=not browser.root_available):
            confirm_browser(section, browser, on_confirm)
            st.rerun()
