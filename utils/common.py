"""
Folder Selector Common Utilities

Shared utility functions used across the app including:
- Session state management per section
- Application settings (config/settings.json)
- Per-user variables stored in the user config dir
- Logging wrapper for Streamlit callbacks
"""

import copy
import functools
import json
import os
import traceback

import streamlit as st
from appdirs import user_config_dir

from utils.config import (
    APP_NAME,
    APP_ROOT,
    DEFAULT_BROWSE_ROOT,
    DEFAULT_DIALOG_TIMEOUT_SECONDS,
    log,
)


# ═══════════════════════════════════════════════════════════════════════════════
# SESSION STATE
# ═══════════════════════════════════════════════════════════════════════════════

def init_session_state(section):
    """
    Initialize session state for a specific section if it doesn't exist.
    """
    if section not in st.session_state:
        st.session_state[section] = {}


def clear_vars(section):
    """
    Drop all temporary variables of a section.
    """
    if section in st.session_state:
        st.session_state[section] = {}


def get_session_var(section, var_name, default=None):
    init_session_state(section)
    return st.session_state[section].get(var_name, default)


def set_session_var(section, var_name, value):
    init_session_state(section)
    st.session_state[section][var_name] = value


def pop_session_var(section, var_name, default=None):
    init_session_state(section)
    return st.session_state[section].pop(var_name, default)


# ═══════════════════════════════════════════════════════════════════════════════
# APPLICATION SETTINGS (config/settings.json)
# ═══════════════════════════════════════════════════════════════════════════════

APP_SETTINGS_FILE = os.path.join(APP_ROOT, "config", "settings.json")
DEFAULT_APP_SETTINGS = {
    "folder_selection": {
        "show_hidden": False,
        "dialog_timeout_seconds": DEFAULT_DIALOG_TIMEOUT_SECONDS,
    }
}


def load_app_settings(settings_file=APP_SETTINGS_FILE):
    """
    Load application-level settings from config/settings.json.
    Creates the file with defaults if missing or invalid.
    """
    if not os.path.exists(settings_file):
        save_app_settings(DEFAULT_APP_SETTINGS, settings_file)
        return copy.deepcopy(DEFAULT_APP_SETTINGS)

    try:
        with open(settings_file, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("settings.json must contain an object")
        return data
    except (json.JSONDecodeError, ValueError) as e:
        log(f"Invalid settings file {settings_file}, restoring defaults: {e}")
        save_app_settings(DEFAULT_APP_SETTINGS, settings_file)
        return copy.deepcopy(DEFAULT_APP_SETTINGS)


def save_app_settings(settings_dict, settings_file=APP_SETTINGS_FILE):
    """
    Persist application-level settings to config/settings.json.
    """
    os.makedirs(os.path.dirname(settings_file), exist_ok=True)
    with open(settings_file, "w", encoding="utf-8") as f:
        json.dump(settings_dict, f, indent=2)


def _timeout_seconds(value):
    """Positive number of seconds, or None for no timeout."""
    if value is None or isinstance(value, bool):
        return DEFAULT_DIALOG_TIMEOUT_SECONDS
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        log(f"Ignoring invalid dialog_timeout_seconds: {value!r}")
        return DEFAULT_DIALOG_TIMEOUT_SECONDS
    return seconds if seconds > 0 else DEFAULT_DIALOG_TIMEOUT_SECONDS


def folder_selection_settings(app_settings=None):
    """
    Folder selection section of the app settings, with defaults filled in and
    invalid values replaced by their defaults.

    The browse root is fixed by the host (FOLDER_SELECTOR_ROOT or the default)
    and is never read from the settings file, which the UI can write.
    """
    if app_settings is None:
        app_settings = load_app_settings()
    stored = app_settings.get("folder_selection", {})
    if not isinstance(stored, dict):
        stored = {}
    return {
        "browse_root": DEFAULT_BROWSE_ROOT,
        "show_hidden": stored.get("show_hidden") is True,
        "dialog_timeout_seconds": _timeout_seconds(stored.get("dialog_timeout_seconds")),
    }


# ═══════════════════════════════════════════════════════════════════════════════
# PER-USER VARIABLES (user config dir)
# ═══════════════════════════════════════════════════════════════════════════════

def vars_file_path(section):
    return os.path.join(user_config_dir(APP_NAME), f"{section}.json")


def load_vars(section):
    """
    Read a per-user variables file. Missing or unreadable files count as empty.
    """
    vars_file = vars_file_path(section)
    if not os.path.exists(vars_file):
        return {}
    try:
        with open(vars_file, "r", encoding="utf-8") as f:
            section_vars = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        log(f"Could not read {vars_file}: {e}")
        return {}
    return section_vars if isinstance(section_vars, dict) else {}


def update_vars(section, updates):
    """
    Update specific values in a per-user variables file.

    Args:
        section (str): Variables section name (becomes {section}.json)
        updates (dict): Key-value pairs to merge into the file
    """
    vars_file = vars_file_path(section)
    section_vars = load_vars(section)
    section_vars.update(updates)
    os.makedirs(os.path.dirname(vars_file), exist_ok=True)
    with open(vars_file, "w", encoding="utf-8") as f:
        json.dump(section_vars, f, indent=2)


# ═══════════════════════════════════════════════════════════════════════════════
# CALLBACK ERROR LOGGING WRAPPER
# ═══════════════════════════════════════════════════════════════════════════════

def logged_callback(func):
    """
    Decorator to wrap Streamlit callbacks with error logging.

    Exceptions are logged to the file and re-raised so Streamlit still shows them.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            log(f"ERROR in callback {func.__name__}: {type(e).__name__}: {e}")
            log(traceback.format_exc())
            raise

    return wrapper
