"""
Folder selection page

Shows the Browse widget and what the app would do with the selected folder: a quick
overview of its contents.
"""

import os

import streamlit as st

from components import folder_selector_widget, print_widget_label, warning_box
from utils.common import get_session_var

st.set_page_config(layout="centered")

st.subheader(":material/folder_open: Select folder", divider="grey")
st.caption(
    "Choose the folder to work with. On a desktop this opens your operating system's "
    "folder dialog. Inside a container you browse the mounted data folder right here."
)

print_widget_label("Folder", icon="folder", help_text="The folder the app will read from.")
selected_folder = folder_selector_widget(
    section="select_folder",
    prompt="Select a folder",
    environment=get_session_var("shared", "environment"),
)

if selected_folder:
    st.subheader(":material/list: Contents", divider="grey")
    try:
        entries = sorted(os.listdir(selected_folder), key=str.lower)
    except OSError as e:
        warning_box(f"Could not read the selected folder: {e}")
    else:
        n_dirs = sum(1 for name in entries if os.path.isdir(os.path.join(selected_folder, name)))
        col1, col2 = st.columns(2)
        col1.metric("Folders", n_dirs)
        col2.metric("Files", len(entries) - n_dirs)
        with st.expander("Entries", expanded=False):
            st.write(entries)
