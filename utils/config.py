"""
Folder Selector Global Configuration

This module defines global constants and the logging function used across the entire
project. It establishes the app root and the platform-specific values that all other
modules depend on.

Key Features:
- Platform and container marker constants used by environment detection
- Centralized path management (app root, helper script, log file)
- Default values for the folder selection settings
- Unified logging function

Important: This file is imported by main.py before session_state exists, so it cannot
depend on Streamlit session state.
"""

import os
import platform

APP_NAME = "FolderSelector"

# ═══════════════════════════════════════════════════════════════════════════════
# PLATFORM DETECTION
# ═══════════════════════════════════════════════════════════════════════════════

# Raw OS identifier as reported by the interpreter ("Darwin", "Linux", "Windows", ...)
OS_NAME = platform.system()

# File that container runtimes create at the filesystem root. If it exists there
# is no display server to show a native dialog on.
CONTAINER_MARKER = "/.dockerenv"

# ═══════════════════════════════════════════════════════════════════════════════
# CORE DIRECTORY STRUCTURE
# ═══════════════════════════════════════════════════════════════════════════════

# Path calculation: utils/config.py -> utils -> app root
APP_ROOT = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))

# Standalone script that shows the Tk / win32 dialog in a child process
FOLDER_SELECTOR_SCRIPT = os.path.join(APP_ROOT, "utils", "folder_selector.py")

LOG_DIR = os.path.join(APP_ROOT, "assets", "logs")
LOG_FILE = os.path.join(LOG_DIR, "log.txt")

# ═══════════════════════════════════════════════════════════════════════════════
# FOLDER SELECTION DEFAULTS
# ═══════════════════════════════════════════════════════════════════════════════

DEFAULT_PROMPT = "Select a folder"

# Permitted root of the in-browser directory browser. The environment variable
# wins over the default so container images can mount data elsewhere.
DEFAULT_BROWSE_ROOT = os.environ.get("FOLDER_SELECTOR_ROOT", "/data")

# None means a native dialog may stay open indefinitely
DEFAULT_DIALOG_TIMEOUT_SECONDS = None

# ═══════════════════════════════════════════════════════════════════════════════
# UTILITY FUNCTIONS
# ═══════════════════════════════════════════════════════════════════════════════

def log(msg):
    """
    Unified logging function that writes to both file and console.

    Args:
        msg (str): Message to log

    Behavior:
        - Appends message to assets/logs/log.txt
        - Prints message to console (stdout), also when the log file cannot be
          written (e.g. a read-only app root inside a container)

    Note: main.py handles archival of previous sessions.
    """
    try:
        os.makedirs(os.path.dirname(LOG_FILE), exist_ok=True)
        with open(LOG_FILE, 'a', encoding="utf-8") as f:
            f.write(f"{msg}\n")
    except OSError as e:
        print(f"Could not write to {LOG_FILE}: {e}")
    print(msg)
