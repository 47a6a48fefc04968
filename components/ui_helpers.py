"""
UI helper functions for the Folder Selector Streamlit app.
"""

import streamlit as st
from st_flexible_callout_elements import flexible_callout

ACCENT_COLOR = "#086164"


def print_widget_label(label_text, icon=None, help_text=None, sidebar=False):
    """
    Print a formatted widget label with optional icon and help text.

    Args:
        label_text: The text to display
        icon: Optional material icon name (without 'material/' prefix)
        help_text: Optional help text tooltip
        sidebar: If True, displays in sidebar with smaller text
    """
    line = f":material/{icon}: &nbsp; " if icon else ""

    if sidebar:
        st.sidebar.markdown(
            f"<small>{line}<b>{label_text}</b></small>", unsafe_allow_html=True, help=help_text)
    else:
        st.markdown(f"{line}**{label_text}**", help=help_text)


def _callout(msg, title, icon, background_color, font_color):
    if title:
        msg = f'<span style="font-weight: bold;">{title}</span><br>{msg}'
    flexible_callout(msg,
                     icon=icon,
                     background_color=background_color,
                     font_color=font_color,
                     icon_size=23)


def info_box(msg, title=None, icon=":material/info:"):
    """Display an informational callout box."""
    _callout(msg, title, icon, "#d9e3e7af", ACCENT_COLOR)


def warning_box(msg, title=None, icon=":material/warning:"):
    """Display a warning callout box."""
    _callout(msg, title, icon, "#fffbeb", "#936b0c")


def code_span(text):
    """HTML code span in the app's accent color."""
    return f"<code style='color:{ACCENT_COLOR}; font-family:monospace;'>{text}</code>"


def path_field(path, placeholder="None selected...", max_chars=45):
    """
    Grey rounded field showing a (shortened) path, or a placeholder when empty.
    """
    if not path:
        text = f'<span style="color: grey;"> {placeholder}</span>'
    else:
        short = "..." + path[-max_chars:] if len(path) > max_chars else path
        text = f"Selected &nbsp;&nbsp;{code_span(short)}"
    st.markdown(
        f"""
            <div style="background-color: #f0f2f6; padding: 7px; border-radius: 8px;">
                &nbsp;&nbsp;{text}
            </div>
            """,
        unsafe_allow_html=True
    )
