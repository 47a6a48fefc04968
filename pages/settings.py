"""
Folder Selector Settings

Configuration interface for the folder selection settings:
- Permitted root of the in-browser directory browser
- Hidden folder visibility
- Native dialog timeout
- Environment and system information
"""

import platform
import sys

import streamlit as st

from utils.common import (
    folder_selection_settings,
    get_session_var,
    load_app_settings,
    save_app_settings,
    vars_file_path,
)
from utils.config import LOG_FILE
from utils.environment import current_environment

st.set_page_config(layout="centered")


# FOLDER SELECTION
app_settings = load_app_settings()
settings = folder_selection_settings(app_settings)

st.subheader(":material/folder_managed: Folder selection", divider="grey")
st.caption(
    "The browse root limits the in-browser directory browser, which is used when the "
    "app runs inside a container. It is fixed by the host and cannot be changed here. "
    "Native dialogs are not affected by it."
)

st.text_input("Browse root", value=settings["browse_root"], disabled=True,
              help="Set by the host with the FOLDER_SELECTOR_ROOT environment variable.")

with st.form("folder_selection_settings_form"):
    show_hidden = st.toggle("Show hidden folders", value=bool(settings["show_hidden"]))
    timeout = settings["dialog_timeout_seconds"]
    timeout_value = st.number_input(
        "Native dialog timeout (seconds, 0 = no timeout)",
        min_value=0,
        value=int(timeout) if timeout else 0,
        step=10,
        help="Gives up on a native folder dialog that is left open for this long.",
    )

    submitted = st.form_submit_button("Save", type="primary", width="stretch")

    if submitted:
        app_settings["folder_selection"] = {
            "show_hidden": bool(show_hidden),
            "dialog_timeout_seconds": int(timeout_value) or None,
        }
        save_app_settings(app_settings)
        st.rerun()


# SYSTEM INFORMATION
st.subheader(":material/info: System", divider="grey")
environment = get_session_var("shared", "environment") or current_environment()
st.write("Environment:", environment.value)
st.write("Platform:", platform.platform())
st.write("Python:", sys.version.split()[0])
st.write("Log file:", LOG_FILE)
st.write("Per-user settings:", vars_file_path("general_settings"))
with st.expander("st.session_state", expanded=False):
    st.write(st.session_state)
