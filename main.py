"""
Folder Selector Streamlit Application - Main Entry Point

Locally-run web UI that lets the user pick a folder on the machine running the server:
- On macOS, Linux and Windows hosts through the OS-native folder dialog
- Inside a container (no display server) through a directory browser in the page

Startup detection: an empty session_state means a fresh session. That is when the log
of the previous session is archived and the environment is detected. Reruns reuse the
values cached in session_state.

Run with:
streamlit run main.py
"""

import os
import shutil
import sys
from datetime import datetime

import streamlit as st

# Local imports - global config must be imported before anything else
from utils.config import APP_NAME, LOG_DIR, LOG_FILE, log

# Force unbuffered output for real-time logging
sys.stdout.reconfigure(line_buffering=True)

st.set_page_config(initial_sidebar_state="auto", page_title="Folder Selector")


def start_session_log():
    """Archive the previous session log and start a fresh one."""
    previous_sessions_dir = os.path.join(LOG_DIR, "previous_sessions")
    try:
        os.makedirs(previous_sessions_dir, exist_ok=True)

        if os.path.exists(LOG_FILE) and os.path.getsize(LOG_FILE) > 0:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            shutil.move(LOG_FILE, os.path.join(previous_sessions_dir, f"log_{timestamp}.txt"))

        with open(LOG_FILE, "w", encoding="utf-8") as file:
            session_start = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            file.write(f"{APP_NAME} Log - Session Started: {session_start}\n")
            file.write("=" * 60 + "\n")
            file.write("Previous sessions are archived in: assets/logs/previous_sessions/\n")
            file.write("=" * 60 + "\n\n")
    except PermissionError:
        print(f"Permission denied when accessing {LOG_FILE}. Could not setup logging.")
    except OSError as e:
        print(f"Error setting up logging: {e}")


# ═══════════════════════════════════════════════════════════════════════════════
# STARTUP INITIALIZATION (runs only when session_state is empty)
# ═══════════════════════════════════════════════════════════════════════════════

if st.session_state == {}:
    start_session_log()

    from utils.common import load_app_settings, set_session_var
    from utils.environment import current_environment

    # Creates config/settings.json with defaults on first run
    load_app_settings()

    environment = current_environment()
    set_session_var("shared", "environment", environment)
    log(f"Session started in environment: {environment.value}")

# ═══════════════════════════════════════════════════════════════════════════════
# MAIN APPLICATION (runs on startup and every rerun)
# ═══════════════════════════════════════════════════════════════════════════════

from utils.common import get_session_var
from utils.environment import current_environment

environment = get_session_var("shared", "environment") or current_environment()

select_folder_page = st.Page(
    os.path.join("pages", "select_folder.py"), title="Select folder", icon=":material/folder_open:")
settings_page = st.Page(
    os.path.join("pages", "settings.py"), title="Settings", icon=":material/settings:")
pg = st.navigation([select_folder_page, settings_page])

st.sidebar.caption(f":material/computer: Environment: **{environment.value}**")

pg.run()
